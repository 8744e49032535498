"""Database wiring for the Flask app."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories import (
    BudgetRepository,
    CreditCardRepository,
    EmergencyFundRepository,
    TransactionRepository,
)
from .infra.database import bootstrap_database
from .infra.repositories import (
    SQLModelBudgetRepository,
    SQLModelCreditCardRepository,
    SQLModelEmergencyFundRepository,
    SQLModelTransactionRepository,
)

_EXTENSION_KEY = "financeflow"


def init_db(app: Flask) -> None:
    """Create the engine and schema, then attach repositories to the app."""

    config: BaseConfig = app.config["FINANCEFLOW_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    app.extensions[_EXTENSION_KEY] = {
        "engine": engine,
        "credit_cards": SQLModelCreditCardRepository(session_factory),
        "emergency_funds": SQLModelEmergencyFundRepository(session_factory),
        "budgets": SQLModelBudgetRepository(session_factory),
        "transactions": SQLModelTransactionRepository(session_factory),
    }


def _state() -> dict:
    try:
        return current_app.extensions[_EXTENSION_KEY]
    except KeyError:  # pragma: no cover - exercised when init_db was skipped
        raise RuntimeError("Database not initialized; call init_db(app) first") from None


def get_engine():
    """Return the initialized SQLModel engine."""

    return _state()["engine"]


def credit_card_repository() -> CreditCardRepository:
    return _state()["credit_cards"]


def emergency_fund_repository() -> EmergencyFundRepository:
    return _state()["emergency_funds"]


def budget_repository() -> BudgetRepository:
    return _state()["budgets"]


def transaction_repository() -> TransactionRepository:
    return _state()["transactions"]
