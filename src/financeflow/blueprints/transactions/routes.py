"""Transaction routes: ledger CRUD, monthly listings and period totals."""

from __future__ import annotations

from datetime import date
from typing import Optional

from flask import abort, request

from ...extensions import transaction_repository
from ...logging_config import get_logger
from ...models.transaction import Transaction
from ...services.aggregation import month_bounds, totals
from ..common import (
    current_user_id,
    form_failure,
    month_year_args,
    parse_date,
    request_payload,
    success,
)
from . import bp
from .forms import TransactionForm

logger = get_logger(__name__)


def _date_arg(name: str, *, required: bool = False) -> Optional[date]:
    raw = request.args.get(name)
    if not raw:
        if required:
            abort(400, description="Please provide both start_date and end_date")
        return None
    errors: dict[str, list[str]] = {}
    value = parse_date(errors, name, raw)
    if errors:
        abort(400, description=f"{name}: {errors[name][0]}")
    return value


def _owned_transaction(txn_id: int, user_id: int) -> Transaction:
    transaction = transaction_repository().get_by_id(txn_id, user_id=user_id)
    if transaction is None:
        abort(404, description="Transaction not found")
    return transaction


@bp.get("")
def list_transactions():
    """Transactions newest first, optionally limited to a date range."""

    user_id = current_user_id()
    rows = transaction_repository().list_between(
        user_id=user_id, start_date=_date_arg("start_date"), end_date=_date_arg("end_date")
    )
    return success(rows, count=len(rows))


@bp.get("/month")
def month_transactions():
    user_id = current_user_id()
    month, year = month_year_args(bounded_year=False)
    first, last = month_bounds(month, year)
    rows = transaction_repository().list_between(user_id=user_id, start_date=first, end_date=last)
    logger.info(
        "Fetched monthly transactions",
        extra={"user_id": user_id, "month": month, "year": year, "count": len(rows)},
    )
    return success(rows, month=month, year=year, count=len(rows))


@bp.get("/totals")
def period_totals():
    user_id = current_user_id()
    start = _date_arg("start_date", required=True)
    end = _date_arg("end_date", required=True)
    if start > end:
        abort(400, description="start_date must not be after end_date")

    rows = transaction_repository().list_between(user_id=user_id, start_date=start, end_date=end)
    summary = totals((row.to_snapshot() for row in rows), start, end)
    return success(summary, start_date=start, end_date=end)


@bp.get("/<int:txn_id>")
def get_transaction(txn_id: int):
    return success(_owned_transaction(txn_id, current_user_id()))


@bp.post("")
def create_transaction():
    user_id = current_user_id()
    form = TransactionForm(request_payload())
    if not form.validate():
        return form_failure(form.errors)

    transaction = transaction_repository().create(
        Transaction(user_id=user_id, **form.cleaned), user_id=user_id
    )
    logger.info(
        "Created transaction",
        extra={"user_id": user_id, "transaction_id": transaction.id, "kind": transaction.kind},
    )
    return success(transaction, 201, message="Transaction added")


@bp.put("/<int:txn_id>")
def update_transaction(txn_id: int):
    user_id = current_user_id()
    transaction = _owned_transaction(txn_id, user_id)
    form = TransactionForm(request_payload(), partial=True)
    if not form.validate():
        return form_failure(form.errors)

    for key, value in form.cleaned.items():
        setattr(transaction, key, value)
    transaction = transaction_repository().update(transaction, user_id=user_id)
    return success(transaction, message="Transaction updated")


@bp.delete("/<int:txn_id>")
def delete_transaction(txn_id: int):
    user_id = current_user_id()
    _owned_transaction(txn_id, user_id)
    transaction_repository().delete(txn_id, user_id=user_id)
    logger.info("Deleted transaction", extra={"user_id": user_id, "transaction_id": txn_id})
    return success(message="Transaction deleted")
