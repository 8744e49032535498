"""Flask CLI commands for FinanceFlow."""

from __future__ import annotations

import click

from .services.amortization import Payoff, payoff_months, required_payment, total_interest_paid


def _format_months(months) -> str:
    return "never" if months is Payoff.NEVER else f"{months} months"


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("financeflow-init-db")
    def financeflow_init_db() -> None:
        """Create any missing tables."""

        from .extensions import get_engine
        from .infra.database import init_database

        init_database(get_engine())
        click.echo("Database schema is up to date.")

    @app.cli.command("financeflow-payoff")
    @click.option("--balance", type=float, required=True, help="Outstanding balance")
    @click.option("--apr", type=float, required=True, help="Annual rate in percent")
    @click.option("--payment", type=float, required=True, help="Monthly payment")
    @click.option(
        "--target-months",
        type=int,
        default=None,
        help="Also show the payment needed to clear the balance in this many months",
    )
    def financeflow_payoff(
        balance: float, apr: float, payment: float, target_months: int | None
    ) -> None:
        """Project how long a card takes to pay off."""

        months = payoff_months(balance, apr, payment)
        click.echo(f"Payoff: {_format_months(months)}")
        click.echo(f"Total interest: ${total_interest_paid(balance, months, payment):,.2f}")
        if target_months is not None:
            needed = required_payment(balance, apr, target_months)
            click.echo(f"Required payment for {target_months} months: ${needed:,.2f}")
