"""Emergency fund blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("emergency_fund", __name__, url_prefix="/api/emergency-fund")

from . import routes  # noqa: E402,F401

__all__ = ["bp"]
