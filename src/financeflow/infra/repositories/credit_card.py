"""SQLModel implementation of CreditCard repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.credit_card import CreditCard


class SQLModelCreditCardRepository:
    """SQLModel-based credit card repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, card_id: int, *, user_id: int) -> Optional[CreditCard]:
        """Retrieve a card by ID."""
        with self.session_factory() as session:
            return session.exec(
                select(CreditCard).where(CreditCard.id == card_id, CreditCard.user_id == user_id)
            ).first()

    def list_all(self, *, user_id: int) -> list[CreditCard]:
        """List cards, largest balance first."""
        with self.session_factory() as session:
            statement = (
                select(CreditCard)
                .where(CreditCard.user_id == user_id)
                .order_by(CreditCard.balance.desc())  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, card: CreditCard, *, user_id: int) -> CreditCard:
        """Create a new card."""
        with self.session_factory() as session:
            card.user_id = user_id
            session.add(card)
            session.commit()
            session.refresh(card)
            session.expunge(card)
            return card

    def update(self, card: CreditCard, *, user_id: int) -> CreditCard:
        """Update an existing card and bump its timestamp."""
        with self.session_factory() as session:
            card.user_id = user_id
            card.updated_at = datetime.now(timezone.utc)
            session.add(card)
            session.commit()
            session.refresh(card)
            session.expunge(card)
            return card

    def delete(self, card_id: int, *, user_id: int) -> None:
        """Delete a card by ID."""
        with self.session_factory() as session:
            card = session.exec(
                select(CreditCard).where(CreditCard.id == card_id, CreditCard.user_id == user_id)
            ).first()
            if card:
                session.delete(card)
                session.commit()
