"""Revolving credit card balances."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

from ..services.amortization import RevolvingAccount

if TYPE_CHECKING:  # pragma: no cover
    from .user import User


class CreditCard(SQLModel, table=True):
    """A credit card tracked for payoff planning."""

    __tablename__: ClassVar[str] = "credit_card"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=50, index=True)
    balance: float = Field(default=0.0, nullable=False, ge=0)
    apr: float = Field(nullable=False, ge=0, le=100)
    minimum_payment: float = Field(nullable=False, ge=0)
    credit_limit: Optional[float] = Field(default=None, ge=0)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )

    user: "User" = Relationship(
        sa_relationship=relationship("User", back_populates="credit_cards")
    )

    def to_snapshot(self) -> RevolvingAccount:
        return RevolvingAccount(
            balance=self.balance,
            apr=self.apr,
            minimum_payment=self.minimum_payment,
            credit_limit=self.credit_limit,
            id=self.id,
            name=self.name,
        )
