from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def normalize_email(value: str) -> str:
    """Emails are matched case-insensitively, without surrounding whitespace."""
    return require_non_empty(value, "Email").lower()
