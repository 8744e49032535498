"""Emergency fund payload validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common import FieldErrors, parse_number

GOAL_FIELDS = ("target_amount", "current_amount", "monthly_expenses")


@dataclass(slots=True)
class EmergencyFundForm:
    """Partial goal fields for an upsert; at least one must be supplied."""

    data: Mapping[str, Any]
    errors: FieldErrors = field(default_factory=dict, init=False)
    cleaned: dict[str, float] = field(default_factory=dict, init=False)

    def validate(self) -> bool:
        self.errors.clear()
        self.cleaned.clear()

        supplied = [key for key in GOAL_FIELDS if self.data.get(key) not in (None, "")]
        if not supplied:
            self.errors.setdefault("monthly_expenses", []).append(
                "Provide monthly expenses or a target amount."
            )
            return False

        for key in supplied:
            value = parse_number(self.errors, key, self.data.get(key), minimum=Decimal(0))
            if value is not None:
                self.cleaned[key] = value
        return not self.errors


@dataclass(slots=True)
class AmountForm:
    """Signed deposit (positive) or withdrawal (negative)."""

    data: Mapping[str, Any]
    errors: FieldErrors = field(default_factory=dict, init=False)
    amount: Optional[float] = field(default=None, init=False)

    def validate(self) -> bool:
        self.errors.clear()
        self.amount = parse_number(self.errors, "amount", self.data.get("amount"))
        return not self.errors
