"""Emergency fund savings goal, one per user."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class EmergencyFund(SQLModel, table=True):
    """Savings target sized from monthly expenses."""

    __tablename__: ClassVar[str] = "emergency_fund"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, unique=True, index=True)
    target_amount: float = Field(default=0.0, nullable=False, ge=0)
    current_amount: float = Field(default=0.0, nullable=False, ge=0)
    monthly_expenses: float = Field(default=0.0, nullable=False, ge=0)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )

    def to_snapshot(self):
        # Imported lazily; the savings service imports this module.
        from ..services.savings import SavingsGoal

        return SavingsGoal(
            target_amount=self.target_amount,
            current_amount=self.current_amount,
            monthly_expenses=self.monthly_expenses,
        )
