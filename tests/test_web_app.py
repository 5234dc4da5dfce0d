"""Mini README: Tests for the FastAPI dashboard routes.

Each test builds its own application around a fresh controller pinned to a
fixed date, then drives it through ``TestClient``.
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from ledgerly.dashboard import DashboardController
from ledgerly.interface import create_application
from ledgerly.utils.clock import FixedClock

JSON = {"accept": "application/json"}


@pytest.fixture()
def controller() -> DashboardController:
    return DashboardController(clock=FixedClock(date(2024, 2, 15)))


@pytest.fixture()
def client(controller: DashboardController) -> TestClient:
    return TestClient(create_application(controller))


def test_dashboard_shows_empty_state(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "No transactions yet" in response.text
    assert "Set your monthly income goal" in response.text


def test_form_post_redirects_to_dashboard(client: TestClient) -> None:
    response = client.post(
        "/transactions",
        data={"description": "Salary", "amount": "3500", "type": "income", "category": "salary"},
    )

    assert response.status_code == 200
    assert "Salary" in response.text
    assert "+$3,500.00" in response.text


def test_add_and_list_via_json(client: TestClient) -> None:
    created = client.post(
        "/transactions",
        data={"description": "Groceries", "amount": "89.50", "type": "expense", "category": "food"},
        headers=JSON,
    )

    assert created.status_code == 201
    assert created.json()["amount"] == "89.50"
    listed = client.get("/api/transactions").json()["transactions"]
    assert [entry["description"] for entry in listed] == ["Groceries"]


def test_invalid_transaction_returns_400(client: TestClient, controller: DashboardController) -> None:
    response = client.post(
        "/transactions",
        data={"description": "Bad", "amount": "-3", "type": "expense", "category": "food"},
        headers=JSON,
    )

    assert response.status_code == 400
    assert controller.ledger.is_empty


def test_delete_and_missing_lookup(client: TestClient, controller: DashboardController) -> None:
    transaction = controller.submit_transaction("Bus", "2.50", "expense", "transport")

    assert client.post(f"/transactions/{transaction.transaction_id}/delete", headers=JSON).status_code == 200
    assert client.post("/transactions/txn_9999/delete", headers=JSON).status_code == 200
    assert client.get(f"/api/transactions/{transaction.transaction_id}").status_code == 404


def test_clear_needs_confirm_flag(client: TestClient, controller: DashboardController) -> None:
    controller.load_demo_data()

    assert client.post("/transactions/clear", headers=JSON).json() == {"removed": 0}
    assert client.post("/transactions/clear", data={"confirm": "true"}, headers=JSON).json() == {"removed": 5}
    assert client.get("/api/summary").json()["balance_state"] == "empty"


def test_goal_updates_summary(client: TestClient, controller: DashboardController) -> None:
    controller.submit_transaction("Pay", "250", "income", "salary")

    progress = client.post("/goal", data={"goal": "1000"}, headers=JSON).json()
    assert progress == {"percentage": "25.00", "remaining": "750", "has_goal": True}
    assert client.post("/goal", data={"goal": "-5"}, headers=JSON).status_code == 400

    summary = client.get("/api/summary").json()
    assert summary["goal"] == "1000"
    assert summary["monthly_income"] == "250"


def test_demo_data_route(client: TestClient) -> None:
    response = client.post("/demo-data", headers=JSON)

    assert response.status_code == 201
    assert len(response.json()["added"]) == 5
    assert client.get("/api/summary").json()["transaction_count"] == 5


def test_oversized_amount_is_rejected_and_page_still_renders(
    client: TestClient, controller: DashboardController
) -> None:
    response = client.post(
        "/transactions",
        data={"description": "Yacht", "amount": "1e30", "type": "expense", "category": "other"},
        headers=JSON,
    )

    assert response.status_code == 400
    assert controller.ledger.is_empty
    assert client.post("/goal", data={"goal": "1e30"}, headers=JSON).status_code == 400
    assert client.get("/").status_code == 200


def test_largest_amount_renders(client: TestClient, controller: DashboardController) -> None:
    controller.submit_transaction("House", "999999999999.99", "income", "other")
    controller.set_goal("999999999999.99")

    page = client.get("/")

    assert page.status_code == 200
    assert "$999,999,999,999.99" in page.text
    assert "100.0% complete" in page.text
