"""Budget routes: monthly category limits and their utilization."""

from __future__ import annotations

from datetime import date

from flask import abort, request
from sqlalchemy.exc import IntegrityError

from ...extensions import budget_repository, transaction_repository
from ...logging_config import get_logger
from ...models.budget import Budget
from ...services.aggregation import enrich_budgets, month_bounds, total_utilization
from ..common import (
    current_user_id,
    failure,
    form_failure,
    jsonable,
    month_year_args,
    request_payload,
    success,
)
from . import bp
from .forms import BudgetForm

logger = get_logger(__name__)


def _budget_payload(budget: Budget) -> dict:
    return {**jsonable(budget), "is_current_month": budget.is_current_month()}


def _owned_budget(budget_id: int, user_id: int) -> Budget:
    budget = budget_repository().get_by_id(budget_id, user_id=user_id)
    if budget is None:
        abort(404, description="Budget not found")
    return budget


def _month_listing(user_id: int, month: int, year: int):
    budgets = budget_repository().list_for_month(month, year, user_id=user_id)
    logger.info(
        "Fetched monthly budgets",
        extra={"user_id": user_id, "month": month, "year": year, "count": len(budgets)},
    )
    return success(
        [_budget_payload(b) for b in budgets], month=month, year=year, count=len(budgets)
    )


@bp.get("")
def list_budgets():
    user_id = current_user_id()
    budgets = budget_repository().list_all(user_id=user_id)
    return success([_budget_payload(b) for b in budgets], count=len(budgets))


@bp.get("/month")
def month_budgets():
    user_id = current_user_id()
    month, year = month_year_args()
    return _month_listing(user_id, month, year)


@bp.get("/current")
def current_budgets():
    user_id = current_user_id()
    today = date.today()
    return _month_listing(user_id, today.month, today.year)


@bp.get("/status")
def budget_status():
    """Spending against every budget in a month (defaults to the current month)."""

    user_id = current_user_id()
    if "month" in request.args or "year" in request.args:
        month, year = month_year_args()
    else:
        today = date.today()
        month, year = today.month, today.year

    first, last = month_bounds(month, year)
    budgets = [b.to_snapshot() for b in budget_repository().list_for_month(month, year, user_id=user_id)]
    entries = [
        t.to_snapshot()
        for t in transaction_repository().list_between(
            user_id=user_id, start_date=first, end_date=last
        )
    ]
    progress = [
        {**jsonable(item.budget), **jsonable(item.status)}
        for item in enrich_budgets(budgets, entries)
    ]
    return success(
        progress,
        month=month,
        year=year,
        total_utilization=total_utilization(budgets, entries),
    )


@bp.get("/<int:budget_id>")
def get_budget(budget_id: int):
    return success(_budget_payload(_owned_budget(budget_id, current_user_id())))


@bp.post("")
def save_budget():
    """Create the budget, or replace the limit if the category/month already has one."""

    user_id = current_user_id()
    form = BudgetForm(request_payload())
    if not form.validate():
        return form_failure(form.errors)

    cleaned = form.cleaned
    budget = budget_repository().upsert(
        cleaned["category"], cleaned["limit"], cleaned["month"], cleaned["year"], user_id=user_id
    )
    logger.info(
        "Saved budget",
        extra={"user_id": user_id, "category": budget.category, "budget_id": budget.id},
    )
    return success(_budget_payload(budget), 201, message="Budget saved successfully")


@bp.put("/<int:budget_id>")
def update_budget(budget_id: int):
    user_id = current_user_id()
    budget = _owned_budget(budget_id, user_id)
    form = BudgetForm(request_payload(), partial=True)
    if not form.validate():
        return form_failure(form.errors)

    for key, value in form.cleaned.items():
        setattr(budget, key, value)
    try:
        budget = budget_repository().update(budget, user_id=user_id)
    except IntegrityError:
        return failure("Budget already exists for this category, month, and year", 400)
    logger.info("Updated budget", extra={"user_id": user_id, "budget_id": budget_id})
    return success(_budget_payload(budget), message="Budget updated successfully")


@bp.delete("/<int:budget_id>")
def delete_budget(budget_id: int):
    user_id = current_user_id()
    _owned_budget(budget_id, user_id)
    budget_repository().delete(budget_id, user_id=user_id)
    logger.info("Deleted budget", extra={"user_id": user_id, "budget_id": budget_id})
    return success(message="Budget deleted successfully")
