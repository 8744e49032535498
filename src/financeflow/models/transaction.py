"""SQLModel definitions for ledger transactions."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

from ..constants import TransactionKind
from ..services.aggregation import LedgerEntry

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .user import User


class Transaction(SQLModel, table=True):
    """A single income or expense entered by the user."""

    __tablename__: ClassVar[str] = "transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    amount: float = Field(nullable=False, gt=0, description="Always positive; kind gives direction")
    category: str = Field(nullable=False, max_length=50)
    description: str = Field(default="", max_length=200)
    kind: TransactionKind = Field(nullable=False)
    occurred_on: date = Field(nullable=False, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )

    user: "User" = Relationship(
        sa_relationship=relationship("User", back_populates="transactions")
    )

    def to_snapshot(self) -> LedgerEntry:
        return LedgerEntry(
            amount=self.amount,
            category=self.category,
            kind=TransactionKind(self.kind),
            occurred_on=self.occurred_on,
            id=self.id,
        )
