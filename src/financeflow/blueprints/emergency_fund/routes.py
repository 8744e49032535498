"""Emergency fund routes; each user owns at most one fund."""

from __future__ import annotations

from flask import current_app

from ...extensions import emergency_fund_repository
from ...logging_config import get_logger
from ...models.emergency_fund import EmergencyFund
from ...services import savings
from ..common import current_user_id, form_failure, jsonable, request_payload, success
from . import bp
from .forms import AmountForm, EmergencyFundForm

logger = get_logger(__name__)


def _recommended_months() -> int:
    return int(current_app.config.get("EMERGENCY_FUND_MONTHS", savings.RECOMMENDED_MONTHS))


def _fund_payload(fund: EmergencyFund) -> dict:
    summary = savings.summarize_goal(fund.to_snapshot(), months=_recommended_months())
    return {**jsonable(fund), **jsonable(summary)}


@bp.get("")
def get_fund():
    user_id = current_user_id()
    fund = emergency_fund_repository().get_for_user(user_id=user_id)
    if fund is None:
        raise savings.GoalNotFoundError(user_id)
    return success(_fund_payload(fund))


@bp.post("")
def upsert_fund():
    """Create or update the fund; the target defaults to months of expenses."""

    user_id = current_user_id()
    form = EmergencyFundForm(request_payload())
    if not form.validate():
        return form_failure(form.errors)

    fund = savings.upsert(
        repository=emergency_fund_repository(),
        user_id=user_id,
        partial=form.cleaned,
        months=_recommended_months(),
    )
    logger.info("Saved emergency fund", extra={"user_id": user_id})
    return success(_fund_payload(fund), message="Emergency fund saved")


@bp.put("/amount")
def update_amount():
    user_id = current_user_id()
    form = AmountForm(request_payload())
    if not form.validate():
        return form_failure(form.errors)

    fund = savings.apply_delta(
        repository=emergency_fund_repository(),
        user_id=user_id,
        delta=form.amount,
    )
    return success(_fund_payload(fund), message="Emergency fund updated")


@bp.delete("")
def delete_fund():
    user_id = current_user_id()
    savings.delete(repository=emergency_fund_repository(), user_id=user_id)
    logger.info("Deleted emergency fund", extra={"user_id": user_id})
    return success(message="Emergency fund deleted")
