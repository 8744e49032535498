"""User model owning every other record."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


class User(SQLModel, table=True):
    """Account holder; credentials live with the upstream auth service."""

    __tablename__: ClassVar[str] = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=80)
    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    credit_cards = Relationship(
        back_populates="user",
        sa_relationship=relationship("CreditCard", back_populates="user"),
    )
    budgets = Relationship(
        back_populates="user",
        sa_relationship=relationship("Budget", back_populates="user"),
    )
    transactions = Relationship(
        back_populates="user",
        sa_relationship=relationship("Transaction", back_populates="user"),
    )
