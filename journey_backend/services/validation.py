import re
from datetime import date, datetime
from enum import Enum

from journey_backend.errors import ValidationError

RATING_MIN, RATING_MAX = 1, 5
MAX_TAGS = 10
ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def require_user(user_id: str):
    if not user_id:
        raise ValidationError("user ID is required")


def parse_iso_date(value: str, label: str = "date") -> date:
    """Strict YYYY-MM-DD; unpadded months or days are rejected."""
    try:
        if not ISO_DATE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"invalid {label} format, use YYYY-MM-DD") from None


def check_rating(value, label: str):
    if isinstance(value, bool) or not isinstance(value, int) or not RATING_MIN <= value <= RATING_MAX:
        raise ValidationError(f"{label} must be between {RATING_MIN} and {RATING_MAX}")


def check_length(value: str, limit: int, label: str):
    if len(value) > limit:
        raise ValidationError(f"{label} too long, maximum {limit} characters")


def check_tags(value: list, label: str):
    if len(value) > MAX_TAGS:
        raise ValidationError(f"too many {label}, maximum {MAX_TAGS} allowed")


def parse_enum(enum_cls: type[Enum], value, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"invalid {label}: {value}") from None
