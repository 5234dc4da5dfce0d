"""Mini README: FastAPI-powered dashboard for Ledgerly.

Structure:
    * create_application - application factory wiring routes and templates.
    * HTML routes - the dashboard page plus form posts that redirect back.
    * JSON routes - ``/api/*`` endpoints exposing the same state as data.

One ``DashboardController`` backs each application instance. Validation
errors from the ledger surface as HTTP 400 and unknown transaction lookups
as 404; deleting an unknown id is accepted silently.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..dashboard import DashboardController
from ..dashboard.presentation import dashboard_context
from ..finance import LedgerValidationError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def create_application(controller: Optional[DashboardController] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    app = FastAPI(title="Ledgerly Finance Dashboard", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    if controller is None:
        controller = DashboardController.from_settings(settings)
    app.state.controller = controller
    symbol = settings.currency_symbol

    def _back_to_dashboard() -> RedirectResponse:
        return RedirectResponse(url="/", status_code=303)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the summary cards, goal tracker and transaction list."""

        summary = controller.summary()
        LOGGER.debug(
            "Rendering dashboard -> transactions: %s balance: %s month: %s",
            summary.transaction_count,
            summary.balance,
            summary.month_key,
        )
        context = dashboard_context(summary, controller.transactions(), symbol)
        return templates.TemplateResponse(request, "dashboard.html", context)

    @app.post("/transactions")
    async def add_transaction(
        request: Request,
        description: str = Form(""),
        amount: str = Form(""),
        transaction_type: str = Form("expense", alias="type"),
        category: str = Form("other"),
    ):
        """Record a transaction from the dashboard form."""

        try:
            transaction = controller.submit_transaction(
                description, amount, transaction_type, category
            )
        except LedgerValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        if _wants_json(request):
            return JSONResponse(transaction.as_dict(), status_code=201)
        return _back_to_dashboard()

    @app.post("/transactions/clear")
    async def clear_transactions(request: Request, confirm: bool = Form(False)):
        """Clear every transaction once the user has confirmed."""

        removed = controller.clear_transactions(confirmed=confirm)
        if _wants_json(request):
            return JSONResponse({"removed": removed})
        return _back_to_dashboard()

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_transaction(request: Request, transaction_id: str):
        """Delete a single transaction. Unknown ids are ignored."""

        controller.delete_transaction(transaction_id)
        if _wants_json(request):
            return JSONResponse({"deleted": transaction_id})
        return _back_to_dashboard()

    @app.post("/goal")
    async def set_goal(request: Request, goal: str = Form("")):
        """Update the monthly income goal."""

        try:
            controller.set_goal(goal)
        except LedgerValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        if _wants_json(request):
            return JSONResponse(controller.summary().goal_progress.as_dict())
        return _back_to_dashboard()

    @app.post("/demo-data")
    async def load_demo_data(request: Request):
        """Populate the ledger with the sample transactions."""

        added = controller.load_demo_data()
        if _wants_json(request):
            return JSONResponse({"added": [t.transaction_id for t in added]}, status_code=201)
        return _back_to_dashboard()

    @app.get("/api/transactions")
    async def list_transactions() -> JSONResponse:
        """Return transactions newest first."""

        payload = [transaction.as_dict() for transaction in controller.transactions()]
        return JSONResponse({"transactions": payload})

    @app.get("/api/transactions/{transaction_id}")
    async def get_transaction(transaction_id: str) -> JSONResponse:
        try:
            transaction = controller.ledger.get_transaction(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(transaction.as_dict())

    @app.get("/api/summary")
    async def summary() -> JSONResponse:
        """Return aggregate totals, monthly figures and goal progress."""

        return JSONResponse(controller.summary().as_dict())

    return app


def _wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")
