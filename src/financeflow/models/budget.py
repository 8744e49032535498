"""Monthly category budgets."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

from ..services.aggregation import BudgetLimit

if TYPE_CHECKING:  # pragma: no cover
    from .user import User


class Budget(SQLModel, table=True):
    """Spending limit for one category in one month."""

    __tablename__: ClassVar[str] = "budget"
    __table_args__ = (
        UniqueConstraint("user_id", "category", "month", "year", name="uq_budget_period"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    category: str = Field(nullable=False, max_length=50)
    limit: float = Field(nullable=False, ge=0)
    month: int = Field(nullable=False, ge=1, le=12, index=True)
    year: int = Field(nullable=False, ge=2020, le=2100, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )

    user: "User" = Relationship(sa_relationship=relationship("User", back_populates="budgets"))

    def is_current_month(self, today: date | None = None) -> bool:
        today = today or date.today()
        return self.month == today.month and self.year == today.year

    def to_snapshot(self) -> BudgetLimit:
        return BudgetLimit(
            category=self.category,
            limit=self.limit,
            month=self.month,
            year=self.year,
            id=self.id,
        )
