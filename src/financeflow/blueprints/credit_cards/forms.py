"""Credit card payload validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from ..common import FieldErrors, parse_number, parse_text


@dataclass(slots=True)
class CreditCardForm:
    """Validates create (all fields) or update (``partial``) payloads."""

    data: Mapping[str, Any]
    partial: bool = False
    errors: FieldErrors = field(default_factory=dict, init=False)
    cleaned: dict[str, Any] = field(default_factory=dict, init=False)

    def _wants(self, key: str) -> bool:
        return not self.partial or key in self.data

    def validate(self) -> bool:
        self.errors.clear()
        self.cleaned.clear()

        if self._wants("name"):
            self.cleaned["name"] = parse_text(
                self.errors, "name", self.data.get("name"), max_length=50
            )
        if self._wants("balance"):
            raw = self.data.get("balance")
            if raw is None and not self.partial:
                raw = 0
            self.cleaned["balance"] = parse_number(
                self.errors, "balance", raw, minimum=Decimal(0)
            )
        if self._wants("apr"):
            self.cleaned["apr"] = parse_number(
                self.errors, "apr", self.data.get("apr"), minimum=Decimal(0), maximum=Decimal(100)
            )
        if self._wants("minimum_payment"):
            self.cleaned["minimum_payment"] = parse_number(
                self.errors, "minimum_payment", self.data.get("minimum_payment"), minimum=Decimal(0)
            )
        if self._wants("credit_limit"):
            raw_limit = self.data.get("credit_limit")
            self.cleaned["credit_limit"] = (
                None
                if raw_limit in (None, "")
                else parse_number(self.errors, "credit_limit", raw_limit, minimum=Decimal(0))
            )

        return not self.errors
