"""Credit card blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("credit_cards", __name__, url_prefix="/api/credit-cards")

from . import routes  # noqa: E402,F401

__all__ = ["bp"]
