"""
Conversion of primitive request fields into domain values.

Every failure surfaces as a ``ValidationError``.
"""

from datetime import date

from pocket.domain.errors import ValidationError
from pocket.utils.datetime_helpers import parse_date


def parse_request_date(value: str, field: str = "date") -> date:
    try:
        return parse_date(value)
    except (AttributeError, ValueError) as e:
        raise ValidationError(
            f"Invalid {field} format: {value!r}. Expected YYYY-MM-DD"
        ) from e


def parse_optional_date(value: str | None, field: str) -> date | None:
    if value is None or not value.strip():
        return None
    return parse_request_date(value, field)


def parse_id(value: int | str, field: str = "id") -> int:
    """Parse an integer id given as int or decimal string."""
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"Invalid {field}: {value!r}") from e
