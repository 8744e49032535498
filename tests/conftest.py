"""Pytest configuration and shared fixtures for FinanceFlow tests.

This module provides database fixtures, test data factories, and helper utilities
for testing calculators, repositories, and routes without touching a real database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from financeflow.constants import TransactionKind
from financeflow.infra.database import create_session_factory
from financeflow.models import Budget, CreditCard, EmergencyFund, Transaction, User

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Session used by the factories; committed after the test."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the repositories receive in the app."""

    return create_session_factory(db_engine)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory(db_session):
    def _create_user(name: str = "Tester", email: str | None = None) -> User:
        email = email or f"{name.lower().replace(' ', '.')}@example.com"
        user = User(name=name, email=email)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    """Create a default user for scoping data."""

    return user_factory()


@pytest.fixture
def other_user(user_factory) -> User:
    return user_factory("Someone Else")


@pytest.fixture
def credit_card_factory(db_session, user):
    """Factory for creating persisted credit cards.

    Returns:
        Callable: Function that creates and persists CreditCard instances
    """

    def _create_card(
        name: str = "Test Card",
        balance: float = 1000.0,
        apr: float = 18.0,
        minimum_payment: float = 25.0,
        credit_limit: float | None = 5000.0,
        owner: User | None = None,
    ) -> CreditCard:
        owner = owner or user
        card = CreditCard(
            user_id=owner.id,
            name=name,
            balance=balance,
            apr=apr,
            minimum_payment=minimum_payment,
            credit_limit=credit_limit,
        )
        db_session.add(card)
        db_session.commit()
        db_session.refresh(card)
        return card

    return _create_card


@pytest.fixture
def emergency_fund_factory(db_session, user):
    def _create_fund(
        target_amount: float = 18000.0,
        current_amount: float = 5000.0,
        monthly_expenses: float = 3000.0,
        owner: User | None = None,
    ) -> EmergencyFund:
        owner = owner or user
        fund = EmergencyFund(
            user_id=owner.id,
            target_amount=target_amount,
            current_amount=current_amount,
            monthly_expenses=monthly_expenses,
        )
        db_session.add(fund)
        db_session.commit()
        db_session.refresh(fund)
        return fund

    return _create_fund


@pytest.fixture
def budget_factory(db_session, user):
    """Factory for creating monthly category budgets.

    Returns:
        Callable: Function that creates and persists Budget instances
    """

    def _create_budget(
        category: str = "Food",
        limit: float = 300.0,
        month: int | None = None,
        year: int | None = None,
        owner: User | None = None,
    ) -> Budget:
        today = date.today()
        owner = owner or user
        budget = Budget(
            user_id=owner.id,
            category=category,
            limit=limit,
            month=month or today.month,
            year=year or today.year,
        )
        db_session.add(budget)
        db_session.commit()
        db_session.refresh(budget)
        return budget

    return _create_budget


@pytest.fixture
def transaction_factory(db_session, user):
    """Factory for creating ledger transactions.

    Returns:
        Callable: Function that creates and persists Transaction instances
    """

    def _create_transaction(
        amount: float,
        category: str = "Food",
        kind: TransactionKind = TransactionKind.EXPENSE,
        occurred_on: date | None = None,
        description: str = "Test transaction",
        owner: User | None = None,
    ) -> Transaction:
        owner = owner or user
        transaction = Transaction(
            user_id=owner.id,
            amount=amount,
            category=category,
            kind=kind,
            occurred_on=occurred_on or date.today(),
            description=description,
        )
        db_session.add(transaction)
        db_session.commit()
        db_session.refresh(transaction)
        return transaction

    return _create_transaction


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Application wired to an in-memory database with one seeded user."""

    monkeypatch.setenv("FINANCEFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("FINANCEFLOW_DATABASE_URL", raising=False)
    monkeypatch.delenv("FINANCEFLOW_EMERGENCY_FUND_MONTHS", raising=False)

    from financeflow import create_app
    from financeflow.extensions import get_engine

    app = create_app("testing")
    with app.app_context():
        with create_session_factory(get_engine())() as session:
            session.add(User(name="Api User", email="api@example.com"))
            session.add(User(name="Other User", email="other@example.com"))
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "1"}


# =============================================================================
# Helper Functions
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert two floats are equal within tolerance.

    Useful for comparing monetary amounts that may have rounding differences.
    """
    assert abs(actual - expected) < tolerance, (
        f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
    )
