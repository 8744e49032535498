"""Ledger totals and budget utilization rollups."""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..constants import BudgetStatus, TransactionKind
from .money import is_usable, round_percent, to_decimal

WARNING_THRESHOLD = 75
OVER_THRESHOLD = 100


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """Snapshot of a single income or expense."""

    amount: float
    category: str
    kind: TransactionKind
    occurred_on: date
    id: Optional[int] = None


@dataclass(frozen=True, slots=True)
class BudgetLimit:
    """Monthly spending limit for one category."""

    category: str
    limit: float
    month: int
    year: int
    id: Optional[int] = None


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    total_income: float
    total_expense: float
    net: float


@dataclass(frozen=True, slots=True)
class UtilizationStatus:
    spent: float
    limit: float
    percentage: int
    status: BudgetStatus
    remaining: float
    is_over_budget: bool


@dataclass(frozen=True, slots=True)
class BudgetProgress:
    """A budget paired with what has been spent against it."""

    budget: BudgetLimit
    status: UtilizationStatus


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month."""

    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def totals(
    entries: Iterable[LedgerEntry], start: date | datetime, end: date | datetime
) -> LedgerTotals:
    """Sum income and expenses dated within ``start``..``end`` inclusive.

    Amounts are not rounded; callers format for display.
    """

    first, last = _as_date(start), _as_date(end)
    income = 0.0
    expense = 0.0
    for entry in entries:
        if not first <= _as_date(entry.occurred_on) <= last:
            continue
        if entry.kind == TransactionKind.INCOME:
            income += entry.amount
        elif entry.kind == TransactionKind.EXPENSE:
            expense += entry.amount
    return LedgerTotals(total_income=income, total_expense=expense, net=income - expense)


def spending_for_category(
    entries: Iterable[LedgerEntry], category: str, month: int, year: int
) -> float:
    """Total expenses in ``category`` (case-insensitive) for one month."""

    wanted = category.strip().casefold()
    spent = 0.0
    for entry in entries:
        if entry.kind != TransactionKind.EXPENSE:
            continue
        if entry.category.strip().casefold() != wanted:
            continue
        occurred = _as_date(entry.occurred_on)
        if occurred.month == month and occurred.year == year:
            spent += entry.amount
    return spent


def _tier(percentage: int) -> BudgetStatus:
    if percentage > OVER_THRESHOLD:
        return BudgetStatus.OVER
    if percentage >= WARNING_THRESHOLD:
        return BudgetStatus.WARNING
    return BudgetStatus.GOOD


def utilization_status(spent: float, limit: float) -> UtilizationStatus:
    """Classify ``spent`` against ``limit``.

    ``remaining`` is signed so over-budget categories report how far over they are.
    """

    if not is_usable(spent):
        spent = 0.0
    if not is_usable(limit):
        limit = 0.0

    if limit <= 0:
        percentage = 0
    else:
        percentage = max(round_percent(to_decimal(spent) / to_decimal(limit) * 100), 0)

    return UtilizationStatus(
        spent=spent,
        limit=limit,
        percentage=percentage,
        status=_tier(percentage),
        remaining=limit - spent,
        is_over_budget=spent > limit,
    )


def enrich_budgets(
    budgets: Iterable[BudgetLimit], entries: Iterable[LedgerEntry]
) -> list[BudgetProgress]:
    """Pair each budget with its spending status."""

    ledger = list(entries)
    progress: list[BudgetProgress] = []
    for budget in budgets:
        spent = spending_for_category(ledger, budget.category, budget.month, budget.year)
        progress.append(BudgetProgress(budget=budget, status=utilization_status(spent, budget.limit)))
    return progress


def total_utilization(budgets: Iterable[BudgetLimit], entries: Iterable[LedgerEntry]) -> int:
    """Combined spend across budgets as a percentage of their combined limits."""

    ledger = list(entries)
    total_limit = 0.0
    total_spent = 0.0
    for budget in budgets:
        total_limit += budget.limit
        total_spent += spending_for_category(ledger, budget.category, budget.month, budget.year)
    if total_limit <= 0:
        return 0
    return round_percent(to_decimal(total_spent) / to_decimal(total_limit) * 100)


__all__ = [
    "BudgetLimit",
    "BudgetProgress",
    "LedgerEntry",
    "LedgerTotals",
    "UtilizationStatus",
    "enrich_budgets",
    "month_bounds",
    "spending_for_category",
    "total_utilization",
    "totals",
    "utilization_status",
]
