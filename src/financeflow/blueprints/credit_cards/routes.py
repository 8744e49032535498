"""Credit card routes: CRUD plus payoff projections."""

from __future__ import annotations

from flask import abort, request

from ...extensions import credit_card_repository
from ...logging_config import get_logger
from ...models.credit_card import CreditCard
from ...services.amortization import (
    MAX_PAYOFF_MONTHS,
    debt_totals,
    payment_schedule,
    payoff_months,
    required_payment,
    summarize_card,
    total_interest_paid,
)
from ...services.money import is_usable
from ..common import current_user_id, form_failure, jsonable, request_payload, success
from . import bp
from .forms import CreditCardForm

logger = get_logger(__name__)


def _card_payload(card: CreditCard) -> dict:
    return {**jsonable(card), **jsonable(summarize_card(card.to_snapshot()))}


def _owned_card(card_id: int, user_id: int) -> CreditCard:
    card = credit_card_repository().get_by_id(card_id, user_id=user_id)
    if card is None:
        abort(404, description="Credit card not found")
    return card


@bp.get("")
def list_cards():
    """All cards for the user, largest balance first."""

    user_id = current_user_id()
    cards = credit_card_repository().list_all(user_id=user_id)
    logger.info("Fetched credit cards", extra={"user_id": user_id, "count": len(cards)})
    return success([_card_payload(card) for card in cards], count=len(cards))


@bp.get("/totals")
def card_totals():
    user_id = current_user_id()
    cards = credit_card_repository().list_all(user_id=user_id)
    return success(debt_totals(card.to_snapshot() for card in cards))


@bp.get("/<int:card_id>")
def get_card(card_id: int):
    return success(_card_payload(_owned_card(card_id, current_user_id())))


@bp.get("/<int:card_id>/payoff")
def card_payoff(card_id: int):
    """Payoff plan for a target horizon (``months``) or a payment (``payment``).

    Without either, the plan uses the card's minimum payment.
    """

    account = _owned_card(card_id, current_user_id()).to_snapshot()
    months_arg = request.args.get("months", type=int)
    payment_arg = request.args.get("payment", type=float)

    if months_arg is not None:
        if not 1 <= months_arg <= MAX_PAYOFF_MONTHS:
            abort(400, description=f"months must be between 1 and {MAX_PAYOFF_MONTHS}")
        payment = required_payment(account.balance, account.apr, months_arg)
    elif payment_arg is not None:
        if not is_usable(payment_arg) or payment_arg < 0:
            abort(400, description="payment must be a non-negative number")
        payment = payment_arg
    else:
        payment = account.minimum_payment

    months = payoff_months(account.balance, account.apr, payment)
    return success(
        {
            "payment": payment,
            "target_months": months_arg,
            "payoff_months": months,
            "total_interest": total_interest_paid(account.balance, months, payment),
            "schedule": payment_schedule(account, payment=payment),
        }
    )


@bp.post("")
def create_card():
    user_id = current_user_id()
    form = CreditCardForm(request_payload())
    if not form.validate():
        return form_failure(form.errors)

    card = credit_card_repository().create(CreditCard(user_id=user_id, **form.cleaned), user_id=user_id)
    logger.info("Created credit card", extra={"user_id": user_id, "card_id": card.id})
    return success(_card_payload(card), 201, message="Credit card added")


@bp.put("/<int:card_id>")
def update_card(card_id: int):
    user_id = current_user_id()
    card = _owned_card(card_id, user_id)
    form = CreditCardForm(request_payload(), partial=True)
    if not form.validate():
        return form_failure(form.errors)

    for key, value in form.cleaned.items():
        setattr(card, key, value)
    card = credit_card_repository().update(card, user_id=user_id)
    logger.info("Updated credit card", extra={"user_id": user_id, "card_id": card_id})
    return success(_card_payload(card), message="Credit card updated")


@bp.delete("/<int:card_id>")
def delete_card(card_id: int):
    user_id = current_user_id()
    _owned_card(card_id, user_id)
    credit_card_repository().delete(card_id, user_id=user_id)
    logger.info("Deleted credit card", extra={"user_id": user_id, "card_id": card_id})
    return success(message="Credit card deleted")
