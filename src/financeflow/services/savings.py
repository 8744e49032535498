"""Emergency fund progress tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from ..domain.repositories.emergency_fund import EmergencyFundRepository
from ..models.emergency_fund import EmergencyFund
from .money import format_tenths, is_usable, round_percent, to_decimal

logger = logging.getLogger(__name__)

RECOMMENDED_MONTHS = 6
_GOAL_FIELDS = ("target_amount", "current_amount", "monthly_expenses")


class GoalNotFoundError(LookupError):
    """Raised when a user has no emergency fund to update."""

    def __init__(self, user_id: int):
        super().__init__(f"Emergency fund not found for user {user_id}")
        self.user_id = user_id


@dataclass(frozen=True, slots=True)
class SavingsGoal:
    """Snapshot of a savings goal."""

    target_amount: float
    current_amount: float = 0.0
    monthly_expenses: float = 0.0


@dataclass(frozen=True, slots=True)
class GoalSummary:
    target_amount: float
    current_amount: float
    monthly_expenses: float
    progress_percentage: int
    remaining_amount: float
    months_covered: str
    is_goal_met: bool
    recommended_target: float


def progress_percentage(goal: SavingsGoal) -> int:
    """Share of the target saved, as a whole percentage capped at 100."""

    if not is_usable(goal.target_amount) or goal.target_amount <= 0:
        return 0
    if not is_usable(goal.current_amount) or goal.current_amount <= 0:
        return 0
    percent = round_percent(to_decimal(goal.current_amount) / to_decimal(goal.target_amount) * 100)
    return min(percent, 100)


def remaining_amount(goal: SavingsGoal) -> float:
    return max(0.0, goal.target_amount - goal.current_amount)


def months_covered(goal: SavingsGoal) -> str:
    """Months of expenses the current balance covers, formatted to one decimal."""

    if not is_usable(goal.monthly_expenses) or goal.monthly_expenses <= 0:
        return "0.0"
    if not is_usable(goal.current_amount):
        return "0.0"
    return format_tenths(to_decimal(goal.current_amount) / to_decimal(goal.monthly_expenses))


def is_goal_met(goal: SavingsGoal) -> bool:
    return goal.current_amount >= goal.target_amount


def recommended_target(goal: SavingsGoal, months: int = RECOMMENDED_MONTHS) -> float:
    return goal.monthly_expenses * months


def with_delta(goal: SavingsGoal, delta: float) -> SavingsGoal:
    """Return a copy with ``delta`` added to the balance, floored at zero."""

    if not is_usable(delta):
        return goal
    return replace(goal, current_amount=max(0.0, goal.current_amount + delta))


def summarize_goal(goal: SavingsGoal, *, months: int = RECOMMENDED_MONTHS) -> GoalSummary:
    """Bundle every derived figure for display."""

    return GoalSummary(
        target_amount=goal.target_amount,
        current_amount=goal.current_amount,
        monthly_expenses=goal.monthly_expenses,
        progress_percentage=progress_percentage(goal),
        remaining_amount=remaining_amount(goal),
        months_covered=months_covered(goal),
        is_goal_met=is_goal_met(goal),
        recommended_target=recommended_target(goal, months),
    )


def apply_delta(
    *, repository: EmergencyFundRepository, user_id: int, delta: float
) -> EmergencyFund:
    """Deposit (positive) or withdraw (negative) against the user's fund.

    Raises:
        GoalNotFoundError: the user has no emergency fund yet.
    """

    fund = repository.get_for_user(user_id=user_id)
    if fund is None:
        raise GoalNotFoundError(user_id)

    updated = with_delta(fund.to_snapshot(), delta)
    fund.current_amount = updated.current_amount
    logger.info(
        "Applied emergency fund delta",
        extra={"user_id": user_id, "delta": delta, "current_amount": fund.current_amount},
    )
    return repository.update(fund, user_id=user_id)


def upsert(
    *,
    repository: EmergencyFundRepository,
    user_id: int,
    partial: Mapping[str, Any],
    months: int = RECOMMENDED_MONTHS,
) -> EmergencyFund:
    """Create the user's fund or merge ``partial`` into the existing one.

    A missing target defaults to ``months`` of the supplied monthly expenses.
    """

    data = {key: partial[key] for key in _GOAL_FIELDS if partial.get(key) is not None}
    if not data.get("target_amount") and data.get("monthly_expenses"):
        data["target_amount"] = data["monthly_expenses"] * months

    existing: Optional[EmergencyFund] = repository.get_for_user(user_id=user_id)
    if existing is None:
        fund = EmergencyFund(user_id=user_id, **data)
        logger.info("Creating emergency fund", extra={"user_id": user_id})
        return repository.create(fund, user_id=user_id)

    for key, value in data.items():
        setattr(existing, key, value)
    return repository.update(existing, user_id=user_id)


def delete(*, repository: EmergencyFundRepository, user_id: int) -> None:
    """Remove the user's fund.

    Raises:
        GoalNotFoundError: the user has no emergency fund.
    """

    if repository.get_for_user(user_id=user_id) is None:
        raise GoalNotFoundError(user_id)
    repository.delete(user_id=user_id)


__all__ = [
    "GoalNotFoundError",
    "GoalSummary",
    "RECOMMENDED_MONTHS",
    "SavingsGoal",
    "apply_delta",
    "delete",
    "is_goal_met",
    "months_covered",
    "progress_percentage",
    "recommended_target",
    "remaining_amount",
    "summarize_goal",
    "upsert",
    "with_delta",
]
