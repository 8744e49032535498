"""Transaction payload validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...constants import TransactionKind
from ..common import FieldErrors, parse_date, parse_number, parse_text

_KINDS = {kind.value: kind for kind in TransactionKind}


@dataclass(slots=True)
class TransactionForm:
    data: Mapping[str, Any]
    partial: bool = False
    errors: FieldErrors = field(default_factory=dict, init=False)
    cleaned: dict[str, Any] = field(default_factory=dict, init=False)

    def _wants(self, key: str) -> bool:
        return not self.partial or key in self.data

    def validate(self) -> bool:
        self.errors.clear()
        self.cleaned.clear()

        if self._wants("amount"):
            self.cleaned["amount"] = parse_number(
                self.errors, "amount", self.data.get("amount"), strictly_positive=True
            )
        if self._wants("category"):
            self.cleaned["category"] = parse_text(
                self.errors, "category", self.data.get("category"), max_length=50
            )
        if self._wants("description"):
            self.cleaned["description"] = parse_text(
                self.errors,
                "description",
                self.data.get("description"),
                max_length=200,
                required=False,
            )
        if self._wants("kind"):
            raw_kind = str(self.data.get("kind") or "").strip().lower()
            if raw_kind in _KINDS:
                self.cleaned["kind"] = _KINDS[raw_kind]
            else:
                self.errors.setdefault("kind", []).append("Type must be income or expense")
        if self._wants("occurred_on"):
            self.cleaned["occurred_on"] = parse_date(
                self.errors, "occurred_on", self.data.get("occurred_on")
            )

        return not self.errors
