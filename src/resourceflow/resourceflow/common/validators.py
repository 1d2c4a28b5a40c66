from __future__ import annotations

import re
from typing import Optional, Type, TypeVar
from enum import Enum

from ..core.constants import MAX_TEXT_LENGTH
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_TAG_RE = re.compile(r"<[^>]*>")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def sanitize_text(value, *, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Strip HTML tags and control characters, cap the length."""
    if value is None or not isinstance(value, str):
        return ""
    cleaned = value[:max_length]
    cleaned = _TAG_RE.sub("", cleaned)
    cleaned = _CONTROL_RE.sub("", cleaned)
    return cleaned.strip()


def require_non_empty(value, field_name: str, *, max_length: int = MAX_TEXT_LENGTH) -> str:
    cleaned = sanitize_text(value, max_length=max_length)
    if not cleaned:
        raise ValidationError(f"{field_name} is required")
    return cleaned


def require_number(value, field_name: str, *, min_value: Optional[float] = None, max_value: Optional[float] = None) -> float:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number:
        raise ValidationError(f"{field_name} must be a number")
    if min_value is not None and number < min_value:
        raise ValidationError(f"{field_name} must be at least {min_value:g}")
    if max_value is not None and number > max_value:
        raise ValidationError(f"{field_name} must be at most {max_value:g}")
    return number


def require_int(value, field_name: str) -> int:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    return number


def require_positive_id(value, field_name: str) -> int:
    number = require_int(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def require_enum(enum_cls: Type[E], value, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_hex_color(value, field_name: str) -> str:
    if not isinstance(value, str) or not _HEX_COLOR_RE.match(value.strip()):
        raise ValidationError(f"{field_name} must be a valid hex color (e.g., #3b82f6)")
    return value.strip()


def pick(payload: dict, *keys: str, default=None):
    """Return the first key present in payload (camelCase or snake_case input)."""
    for key in keys:
        if key in payload:
            return payload[key]
    return default


def has_any(payload: dict, *keys: str) -> bool:
    return any(key in payload for key in keys)
