"""
Field validation for work items and members.

The request layer validates forms for UX; these checks are the source of truth
and run again inside the store before anything is written.
"""
import re
from typing import Optional


class ValidationError(ValueError):
    """Raised when an input violates a field constraint."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


# One "@", non-empty local part and domain, no whitespace.
EMAIL_PATTERN = r"[^@\s]+@[^@\s]+"


def _require_str(field: str, value) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, f"{field.capitalize()} must be text.")
    return value


def require_id(field: str, value) -> int:
    """Entity ids are plain ints; bool is rejected even though it hashes like 0/1."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, f"{field.capitalize()} must be an integer id.")
    return value


def require_text(field: str, value: Optional[str], max_length: int) -> str:
    """Required string: not None, not blank, not longer than max_length."""
    if value is None:
        raise ValidationError(field, f"{field.capitalize()} is required.")
    value = _require_str(field, value)
    if not value.strip():
        raise ValidationError(field, f"{field.capitalize()} is required.")
    if len(value) > max_length:
        raise ValidationError(
            field, f"{field.capitalize()} cannot exceed {max_length} characters."
        )
    return value


def optional_text(field: str, value: Optional[str], max_length: int) -> Optional[str]:
    """Optional string: None passes through, otherwise bounded by max_length."""
    if value is None:
        return None
    value = _require_str(field, value)
    if len(value) > max_length:
        raise ValidationError(
            field, f"{field.capitalize()} cannot exceed {max_length} characters."
        )
    return value


def require_email(field: str, value: Optional[str], max_length: int) -> str:
    value = require_text(field, value, max_length)
    if not re.fullmatch(EMAIL_PATTERN, value):
        raise ValidationError(field, "Please enter a valid email address.")
    return value
