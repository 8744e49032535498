"""Revolving credit calculators: interest, utilization, payoff horizon and schedules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Union

from .money import CENT, ceil_cents, is_usable, round2, round_percent, to_decimal

logger = logging.getLogger(__name__)

# Fifty years of monthly statements bounds every simulation.
MAX_PAYOFF_MONTHS = 600
# Residual balances smaller than this are float noise, not debt.
_SETTLED = 1e-6


class Payoff(Enum):
    """Open-ended payoff outcomes that are not a month count."""

    NEVER = "never"


PayoffMonths = Union[int, Payoff]


@dataclass(frozen=True, slots=True)
class RevolvingAccount:
    """Snapshot of a credit card balance and its terms."""

    balance: float
    apr: float
    minimum_payment: float
    credit_limit: Optional[float] = None
    id: Optional[int] = None
    name: str = ""


@dataclass(frozen=True, slots=True)
class PaymentProjection:
    """One projected statement in a payoff schedule."""

    month: int
    payment: float
    principal: float
    interest: float
    remaining_balance: float


@dataclass(frozen=True, slots=True)
class CardSummary:
    """Derived figures for a card paid at its minimum."""

    monthly_interest: float
    utilization: Optional[int]
    payoff_months: PayoffMonths
    total_interest: float


@dataclass(frozen=True, slots=True)
class DebtTotals:
    total_debt: float
    total_minimum_payment: float
    card_count: int


def _monthly_rate(apr: float) -> Optional[Decimal]:
    """Return apr/100/12, or None when the APR is unusable or outside 0..100."""

    if not is_usable(apr) or apr < 0 or apr > 100:
        return None
    return to_decimal(apr) / Decimal(1200)


def monthly_interest(balance: float, apr: float) -> float:
    """Interest accrued on ``balance`` for one month, rounded to the cent."""

    rate = _monthly_rate(apr)
    if rate is None or not is_usable(balance) or balance <= 0:
        return 0.0
    return round2(to_decimal(balance) * rate)


def utilization(balance: float, limit: Optional[float]) -> Optional[int]:
    """Balance as a whole percentage of the credit limit.

    Returns None when there is no usable limit. Values above 100 are reported
    as-is so callers can flag over-limit cards.
    """

    if limit is None or not is_usable(limit) or limit <= 0 or not is_usable(balance):
        return None
    return round_percent(to_decimal(balance) / to_decimal(limit) * 100)


def payoff_months(balance: float, apr: float, payment: float) -> PayoffMonths:
    """Months needed to clear ``balance`` paying ``payment`` each month.

    Returns ``Payoff.NEVER`` when the payment does not cover the first month's
    interest, when any input is unusable, or when the simulation would exceed
    ``MAX_PAYOFF_MONTHS``.
    """

    if is_usable(balance) and balance <= 0:
        return 0
    rate = _monthly_rate(apr)
    if rate is None or not is_usable(balance) or not is_usable(payment):
        return Payoff.NEVER
    if payment <= monthly_interest(balance, apr):
        return Payoff.NEVER

    monthly = float(rate)
    remaining = float(balance)
    for month in range(1, MAX_PAYOFF_MONTHS + 1):
        interest = remaining * monthly
        remaining -= payment - interest
        if remaining <= _SETTLED:
            return month

    logger.debug(
        "Payoff simulation hit the %s month cap",
        MAX_PAYOFF_MONTHS,
        extra={"balance": balance, "apr": apr, "payment": payment},
    )
    return Payoff.NEVER


def total_interest_paid(balance: float, months: PayoffMonths, payment: float) -> float:
    """Interest paid over ``months`` payments of ``payment`` against ``balance``."""

    if months is Payoff.NEVER or not months or months < 0:
        return 0.0
    if not is_usable(balance) or not is_usable(payment):
        return 0.0
    return round2(to_decimal(payment) * months - to_decimal(balance))


def required_payment(balance: float, apr: float, target_months: int) -> float:
    """Monthly payment that clears ``balance`` within ``target_months``.

    Uses the annuity formula ``r*B / (1 - (1 + r) ** -n)`` and rounds up to the
    cent so the payment always amortizes in time. A zero or unusable rate
    falls back to straight-line repayment. A non-positive or unusable
    horizon means the whole balance is due now.
    """

    if not is_usable(balance) or balance <= 0:
        return 0.0
    if not is_usable(target_months) or target_months <= 0:
        return balance

    rate = _monthly_rate(apr)
    if rate is None or rate == 0:
        return ceil_cents(to_decimal(balance) / to_decimal(target_months))

    r = float(rate)
    payment = ceil_cents((r * balance) / (1 - (1 + r) ** -target_months))
    # The cent-rounded first month's interest can reach the ceiled payment.
    interest = monthly_interest(balance, apr)
    if payment <= interest:
        payment = round2(to_decimal(interest) + CENT)
    return payment


def payment_schedule(
    account: RevolvingAccount,
    *,
    payment: Optional[float] = None,
    months: Optional[int] = None,
) -> list[PaymentProjection]:
    """Project statements until the card is paid off.

    Interest and balances are kept in whole cents and the final payment only
    covers what is left. ``payment`` defaults to the card minimum; ``months``
    caps the number of rows returned. A non-convergent payment yields no rows.
    """

    amount = account.minimum_payment if payment is None else payment
    if payoff_months(account.balance, account.apr, amount) is Payoff.NEVER:
        return []

    limit = MAX_PAYOFF_MONTHS if months is None else min(months, MAX_PAYOFF_MONTHS)
    rate = _monthly_rate(account.apr) or Decimal(0)
    balance = round2(account.balance)
    schedule: list[PaymentProjection] = []

    while balance > 0 and len(schedule) < limit:
        interest = round2(to_decimal(balance) * rate)
        paid = round2(min(amount, balance + interest))
        principal = round2(paid - interest)
        balance = max(round2(balance + interest - paid), 0.0)
        schedule.append(
            PaymentProjection(
                month=len(schedule) + 1,
                payment=paid,
                principal=principal,
                interest=interest,
                remaining_balance=balance,
            )
        )

    return schedule


def summarize_card(account: RevolvingAccount) -> CardSummary:
    """Compute the figures shown alongside a card."""

    months = payoff_months(account.balance, account.apr, account.minimum_payment)
    return CardSummary(
        monthly_interest=monthly_interest(account.balance, account.apr),
        utilization=utilization(account.balance, account.credit_limit),
        payoff_months=months,
        total_interest=total_interest_paid(account.balance, months, account.minimum_payment),
    )


def debt_totals(accounts: Iterable[RevolvingAccount]) -> DebtTotals:
    """Aggregate balances and minimum payments across cards."""

    total_debt = 0.0
    total_minimum = 0.0
    count = 0
    for account in accounts:
        total_debt += account.balance
        total_minimum += account.minimum_payment
        count += 1
    return DebtTotals(
        total_debt=round2(total_debt),
        total_minimum_payment=round2(total_minimum),
        card_count=count,
    )


__all__ = [
    "CardSummary",
    "DebtTotals",
    "MAX_PAYOFF_MONTHS",
    "Payoff",
    "PaymentProjection",
    "RevolvingAccount",
    "debt_totals",
    "monthly_interest",
    "payment_schedule",
    "payoff_months",
    "required_payment",
    "summarize_card",
    "total_interest_paid",
    "utilization",
]
