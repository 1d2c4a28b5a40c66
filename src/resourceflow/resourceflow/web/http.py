from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(status: int, error: str, message: str, details: Optional[list] = None):
    body: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


def api_view(view):
    """Translate domain errors raised by services into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(400, "Validation failed", e.message, e.details or [e.message])
        except NotFoundError as e:
            return json_error(404, "Not Found", e.message)
        except ConflictError as e:
            return json_error(409, "Conflict", e.message, e.details or None)
        except HTTPException:
            raise
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return json_error(500, "Internal Server Error", "Something went wrong")

    return wrapper


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def query_int(name: str, *aliases: str) -> Optional[int]:
    for key in (name, *aliases):
        raw = request.args.get(key)
        if raw is None or raw == "":
            continue
        try:
            return int(raw)
        except ValueError:
            raise ValidationError(f"{key} must be an integer")
    return None


def query_flag(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() in {"1", "true", "yes"}


def created(payload):
    return jsonify(payload), 201
