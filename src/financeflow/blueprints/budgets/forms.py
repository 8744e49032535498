"""Budget payload validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from ..common import MAX_YEAR, MIN_YEAR, FieldErrors, parse_int, parse_number, parse_text


@dataclass(slots=True)
class BudgetForm:
    """Category limit for one month; ``partial`` validates only supplied keys."""

    data: Mapping[str, Any]
    partial: bool = False
    errors: FieldErrors = field(default_factory=dict, init=False)
    cleaned: dict[str, Any] = field(default_factory=dict, init=False)

    def _wants(self, key: str) -> bool:
        return not self.partial or key in self.data

    def validate(self) -> bool:
        self.errors.clear()
        self.cleaned.clear()

        if self._wants("category"):
            self.cleaned["category"] = parse_text(
                self.errors, "category", self.data.get("category"), max_length=50
            )
        if self._wants("limit"):
            self.cleaned["limit"] = parse_number(
                self.errors, "limit", self.data.get("limit"), minimum=Decimal(0)
            )
        if self._wants("month"):
            self.cleaned["month"] = parse_int(
                self.errors,
                "month",
                self.data.get("month"),
                minimum=1,
                maximum=12,
                message="Month must be between 1 and 12",
            )
        if self._wants("year"):
            self.cleaned["year"] = parse_int(
                self.errors,
                "year",
                self.data.get("year"),
                minimum=MIN_YEAR,
                maximum=MAX_YEAR,
                message=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
            )

        return not self.errors
