"""Enumerations stored in the database and returned by the API."""

from __future__ import annotations

from enum import Enum


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class BudgetStatus(str, Enum):
    """Spending tier relative to the warning (75%) and over (100%) thresholds."""

    GOOD = "good"
    WARNING = "warning"
    OVER = "over"
