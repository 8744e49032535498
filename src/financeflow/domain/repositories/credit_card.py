"""Credit card repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from ...models.credit_card import CreditCard


class CreditCardRepository(Protocol):
    """Repository for credit card entities."""

    def get_by_id(self, card_id: int, *, user_id: int) -> Optional[CreditCard]:
        ...

    def list_all(self, *, user_id: int) -> list[CreditCard]:
        """List cards, largest balance first."""
        ...

    def create(self, card: CreditCard, *, user_id: int) -> CreditCard:
        ...

    def update(self, card: CreditCard, *, user_id: int) -> CreditCard:
        ...

    def delete(self, card_id: int, *, user_id: int) -> None:
        ...
