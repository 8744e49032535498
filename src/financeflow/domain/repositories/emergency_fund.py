"""Emergency fund repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from ...models.emergency_fund import EmergencyFund


class EmergencyFundRepository(Protocol):
    """Repository for the single emergency fund a user may own."""

    def get_for_user(self, *, user_id: int) -> Optional[EmergencyFund]:
        """Return the user's fund, if any."""
        ...

    def create(self, fund: EmergencyFund, *, user_id: int) -> EmergencyFund:
        ...

    def update(self, fund: EmergencyFund, *, user_id: int) -> EmergencyFund:
        ...

    def delete(self, *, user_id: int) -> None:
        ...
