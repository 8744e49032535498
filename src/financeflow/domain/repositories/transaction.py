"""Transaction repository protocol."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from ...models.transaction import Transaction


class TransactionRepository(Protocol):
    """Repository for ledger transactions."""

    def get_by_id(self, txn_id: int, *, user_id: int) -> Optional[Transaction]:
        ...

    def list_between(
        self,
        *,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions in an inclusive date range, newest first."""
        ...

    def create(self, transaction: Transaction, *, user_id: int) -> Transaction:
        ...

    def update(self, transaction: Transaction, *, user_id: int) -> Transaction:
        ...

    def delete(self, txn_id: int, *, user_id: int) -> None:
        ...
