"""
Coercion of JSON request values for the write paths.

Each helper either returns a clean value or raises ValidationFailure
naming the field.
"""
from typing import Any, Optional

from sitecms.errors import ValidationFailure

TRUE_STRINGS = ("1", "true", "yes", "on")
FALSE_STRINGS = ("0", "false", "no", "off", "")


def clean_text(field: str, value: Any) -> Optional[str]:
    """Stripped string, None for null or blank."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationFailure(f"{field} must be a string")
    return value.strip() or None


def clean_bool(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise ValidationFailure(f"{field} must be a boolean")


def clean_int(field: str, value: Any, default: Optional[int] = None) -> Optional[int]:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationFailure(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationFailure(f"{field} must be an integer")
