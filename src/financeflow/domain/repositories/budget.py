"""Budget repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from ...models.budget import Budget


class BudgetRepository(Protocol):
    """Repository for monthly category budgets."""

    def get_by_id(self, budget_id: int, *, user_id: int) -> Optional[Budget]:
        """Retrieve a budget by ID."""
        ...

    def get_for_category(
        self, category: str, month: int, year: int, *, user_id: int
    ) -> Optional[Budget]:
        """Get the budget for a category in a month."""
        ...

    def list_for_month(self, month: int, year: int, *, user_id: int) -> list[Budget]:
        """List budgets for a month ordered by category."""
        ...

    def list_all(self, *, user_id: int) -> list[Budget]:
        """List all budgets, newest period first."""
        ...

    def upsert(
        self, category: str, limit: float, month: int, year: int, *, user_id: int
    ) -> Budget:
        """Create or update the budget for a category and month."""
        ...

    def update(self, budget: Budget, *, user_id: int) -> Budget:
        """Update an existing budget."""
        ...

    def delete(self, budget_id: int, *, user_id: int) -> None:
        """Delete a budget by ID."""
        ...
