"""SQLModel implementation of Budget repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.budget import Budget


class SQLModelBudgetRepository:
    """SQLModel-based budget repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, budget_id: int, *, user_id: int) -> Optional[Budget]:
        """Retrieve a budget by ID."""
        with self.session_factory() as session:
            statement = select(Budget).where(Budget.id == budget_id, Budget.user_id == user_id)
            return session.exec(statement).first()

    def get_for_category(
        self, category: str, month: int, year: int, *, user_id: int
    ) -> Optional[Budget]:
        """Get the budget for a category in a month (category compared case-insensitively)."""
        with self.session_factory() as session:
            statement = (
                select(Budget)
                .where(Budget.user_id == user_id)
                .where(func.lower(Budget.category) == category.strip().lower())
                .where(Budget.month == month)
                .where(Budget.year == year)
            )
            return session.exec(statement).first()

    def list_for_month(self, month: int, year: int, *, user_id: int) -> list[Budget]:
        """List budgets for a month ordered by category."""
        with self.session_factory() as session:
            statement = (
                select(Budget)
                .where(Budget.user_id == user_id)
                .where(Budget.month == month)
                .where(Budget.year == year)
                .order_by(Budget.category)  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_all(self, *, user_id: int) -> list[Budget]:
        """List all budgets, newest period first."""
        with self.session_factory() as session:
            statement = (
                select(Budget)
                .where(Budget.user_id == user_id)
                .order_by(Budget.year.desc(), Budget.month.desc(), Budget.category)  # type: ignore
            )
            return list(session.exec(statement).all())

    def upsert(
        self, category: str, limit: float, month: int, year: int, *, user_id: int
    ) -> Budget:
        """Create or update the budget for a category and month."""
        budget = self.get_for_category(category, month, year, user_id=user_id)
        if budget is None:
            budget = Budget(category=category.strip(), month=month, year=year, limit=limit)
        else:
            budget.limit = limit
        return self.update(budget, user_id=user_id)

    def update(self, budget: Budget, *, user_id: int) -> Budget:
        """Persist a new or changed budget."""
        with self.session_factory() as session:
            budget.user_id = user_id
            session.add(budget)
            session.commit()
            session.refresh(budget)
            session.expunge(budget)
            return budget

    def delete(self, budget_id: int, *, user_id: int) -> None:
        """Delete a budget by ID."""
        with self.session_factory() as session:
            budget = session.exec(
                select(Budget).where(Budget.id == budget_id, Budget.user_id == user_id)
            ).first()
            if budget:
                session.delete(budget)
                session.commit()
