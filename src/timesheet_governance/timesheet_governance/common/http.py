from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def parse_date_arg(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Data inválida (YYYY-MM-DD)")


def parse_int_arg(value, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} inválido")


def to_jsonable(value: Any) -> Any:
    """Dataclasses/enums/dates -> plain JSON types."""
    if is_dataclass(value) and not isinstance(value, type):
        return {k: to_jsonable(v) for k, v in asdict(value).items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def ok(data: Any = None, *, message: str | None = None, status: int = 200):
    body: dict[str, Any] = {"success": True, "data": to_jsonable(data)}
    if message:
        body["message"] = message
    return jsonify(body), status


def fail(error: str, *, status: int = 400, message: str | None = None):
    body: dict[str, Any] = {"success": False, "error": error}
    if message:
        body["message"] = message
    return jsonify(body), status


def json_errors(view):
    """Map domain errors raised by a view onto the JSON error envelope."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return fail(str(e), status=404)
        except ValidationError as e:
            return fail(str(e), status=400)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.path)
            return fail("Erro interno", status=500)

    return wrapper
