"""Request helpers shared by the JSON blueprints."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional

from flask import Flask, abort, jsonify, request
from sqlmodel import SQLModel
from werkzeug.exceptions import HTTPException

from ..logging_config import get_logger
from ..services.savings import GoalNotFoundError

logger = get_logger(__name__)

USER_HEADER = "X-User-Id"
MIN_YEAR = 2020
MAX_YEAR = 2100

FieldErrors = dict[str, list[str]]


def current_user_id() -> int:
    """Return the owner id forwarded by the auth layer, or abort with 401."""

    raw = request.headers.get(USER_HEADER, "").strip()
    try:
        user_id = int(raw)
    except ValueError:
        abort(401, description=f"{USER_HEADER} header is required")
    if user_id <= 0:
        abort(401, description=f"{USER_HEADER} header is required")
    return user_id


def jsonable(value: Any) -> Any:
    """Convert dataclasses, SQLModel rows, enums and dates into JSON-safe values."""

    if isinstance(value, SQLModel):
        return jsonable(value.model_dump())
    if is_dataclass(value) and not isinstance(value, type):
        return jsonable(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [jsonable(item) for item in value]
    return value


def success(data: Any = None, status: int = 200, **extra: Any):
    payload = {"success": True, **{k: jsonable(v) for k, v in extra.items()}}
    if data is not None:
        payload["data"] = jsonable(data)
    return jsonify(payload), status


def failure(message: str, status: int = 400, errors: Optional[FieldErrors] = None):
    payload: dict[str, Any] = {"success": False, "message": message}
    if errors:
        payload["errors"] = errors
    return jsonify(payload), status


def form_failure(errors: FieldErrors):
    """400 response joining every field message, the way validation errors are reported."""

    messages = [message for field_messages in errors.values() for message in field_messages]
    return failure(", ".join(messages), 400, errors)


def request_payload() -> Mapping[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, Mapping) else {}


def _add_error(errors: FieldErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def parse_number(
    errors: FieldErrors,
    field: str,
    raw: Any,
    *,
    minimum: Optional[Decimal] = None,
    maximum: Optional[Decimal] = None,
    strictly_positive: bool = False,
) -> Optional[float]:
    """Parse a numeric field, recording messages in ``errors`` on failure."""

    if raw is None or raw == "":
        _add_error(errors, field, "This field is required.")
        return None
    if isinstance(raw, bool):
        _add_error(errors, field, "Enter a valid number.")
        return None
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError, ValueError):
        _add_error(errors, field, "Enter a valid number.")
        return None
    if not value.is_finite():
        _add_error(errors, field, "Enter a valid number.")
        return None

    if strictly_positive and value <= 0:
        _add_error(errors, field, "Amount must be greater than zero.")
    elif minimum is not None and value < minimum:
        _add_error(errors, field, f"Value cannot be less than {minimum}.")
    if maximum is not None and value > maximum:
        _add_error(errors, field, f"Value cannot exceed {maximum}.")
    return float(value)


def parse_int(
    errors: FieldErrors,
    field: str,
    raw: Any,
    *,
    minimum: int,
    maximum: int,
    message: str,
) -> Optional[int]:
    """Parse a bounded integer field."""

    if raw is None or raw == "" or isinstance(raw, bool):
        _add_error(errors, field, "This field is required.")
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        _add_error(errors, field, message)
        return None
    if not minimum <= value <= maximum:
        _add_error(errors, field, message)
    return value


def parse_text(
    errors: FieldErrors, field: str, raw: Any, *, max_length: int, required: bool = True
) -> str:
    text = "" if raw is None else str(raw).strip()
    if required and not text:
        _add_error(errors, field, "This field is required.")
    elif len(text) > max_length:
        _add_error(errors, field, f"Cannot exceed {max_length} characters.")
    return text


def parse_date(errors: FieldErrors, field: str, raw: Any) -> Optional[date]:
    """Parse an ISO date (a full timestamp is truncated to its date)."""

    text = "" if raw is None else str(raw).strip()
    if not text:
        _add_error(errors, field, "Date is required.")
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        _add_error(errors, field, "Enter a valid date (YYYY-MM-DD).")
        return None


def month_year_args(*, bounded_year: bool = True) -> tuple[int, int]:
    """Read ``month`` and ``year`` query parameters or abort with 400."""

    month_raw = request.args.get("month")
    year_raw = request.args.get("year")
    if not month_raw or not year_raw:
        abort(400, description="Please provide both month and year")
    try:
        month, year = int(month_raw), int(year_raw)
    except ValueError:
        abort(400, description="Month and year must be whole numbers")
    if not 1 <= month <= 12:
        abort(400, description="Month must be between 1 and 12")
    if bounded_year and not MIN_YEAR <= year <= MAX_YEAR:
        abort(400, description=f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    if not 1 <= year <= 9999:
        abort(400, description="Year is out of range")
    return month, year


def register_error_handlers(app: Flask) -> None:
    """Render errors as the JSON envelope used by every endpoint."""

    @app.errorhandler(GoalNotFoundError)
    def _goal_not_found(exc: GoalNotFoundError):
        logger.info("Emergency fund missing", extra={"user_id": exc.user_id})
        return failure("Emergency fund not found", 404)

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return failure(exc.description or exc.name, exc.code or 500)


__all__ = [
    "USER_HEADER",
    "current_user_id",
    "failure",
    "form_failure",
    "jsonable",
    "month_year_args",
    "parse_date",
    "parse_int",
    "parse_number",
    "parse_text",
    "register_error_handlers",
    "request_payload",
    "success",
]
