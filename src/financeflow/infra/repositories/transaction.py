"""SQLModel implementation of Transaction repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.transaction import Transaction


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, txn_id: int, *, user_id: int) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        with self.session_factory() as session:
            return session.exec(
                select(Transaction)
                .where(Transaction.id == txn_id)
                .where(Transaction.user_id == user_id)
            ).first()

    def list_between(
        self,
        *,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions in an inclusive date range, newest first."""
        with self.session_factory() as session:
            statement = select(Transaction).where(Transaction.user_id == user_id)
            if start_date:
                statement = statement.where(Transaction.occurred_on >= start_date)
            if end_date:
                statement = statement.where(Transaction.occurred_on <= end_date)
            statement = statement.order_by(
                Transaction.occurred_on.desc(), Transaction.id.desc()  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, transaction: Transaction, *, user_id: int) -> Transaction:
        """Create a new transaction."""
        with self.session_factory() as session:
            transaction.user_id = user_id
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            session.expunge(transaction)
            return transaction

    def update(self, transaction: Transaction, *, user_id: int) -> Transaction:
        """Update an existing transaction."""
        with self.session_factory() as session:
            transaction.user_id = user_id
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            session.expunge(transaction)
            return transaction

    def delete(self, txn_id: int, *, user_id: int) -> None:
        """Delete a transaction by ID."""
        with self.session_factory() as session:
            transaction = session.exec(
                select(Transaction)
                .where(Transaction.id == txn_id)
                .where(Transaction.user_id == user_id)
            ).first()
            if transaction:
                session.delete(transaction)
                session.commit()
