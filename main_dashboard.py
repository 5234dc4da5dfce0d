"""Mini README: Entry point CLI for the Ledgerly finance dashboard.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags, and prints a quick terminal
summary of the sample data. Settings are drawn from ``LEDGERLY_*``
environment variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from ledgerly.configuration import get_settings
from ledgerly.dashboard import DashboardController
from ledgerly.dashboard.presentation import (
    balance_message,
    format_currency,
    goal_status,
    signed_amount,
)
from ledgerly.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and inspect the Ledgerly finance dashboard.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open 0.0.0.0 directly, so point at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Ledgerly on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "ledgerly.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary(
    goal: str = typer.Option("0", help="Monthly income goal to measure against."),
) -> None:
    """Print the dashboard summary for the sample transactions."""

    settings = get_settings()
    symbol = settings.currency_symbol
    controller = DashboardController(goal=goal)
    controller.load_demo_data()
    result = controller.summary()

    for transaction in controller.transactions():
        typer.echo(
            f"{transaction.occurred_on.isoformat()}  {transaction.description:<24}"
            f"{transaction.category:<15}{signed_amount(transaction, symbol):>14}"
        )
    typer.echo("")
    typer.echo(f"Balance:        {format_currency(result.balance, symbol)} ({balance_message(result.balance_state)})")
    typer.echo(f"Total income:   {format_currency(result.total_income, symbol)}")
    typer.echo(f"Total expenses: {format_currency(result.total_expenses, symbol)}")
    typer.echo(f"{result.month_key} net:    {format_currency(result.monthly_net, symbol)}")
    typer.echo(f"Goal:           {goal_status(result.goal_progress, symbol)}")


if __name__ == "__main__":
    cli()
