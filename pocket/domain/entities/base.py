from enum import StrEnum

from pocket.domain.errors import ValidationError


class ClosedStrEnum(StrEnum):
    """String enum that rejects unknown values with a ValidationError."""

    @classmethod
    def parse(cls, value: "str | ClosedStrEnum") -> "ClosedStrEnum":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid {cls.__name__} '{value}', expected one of: {allowed}"
            ) from e


def require_text(value: str | None, field: str) -> str:
    """Return the stripped text or raise if nothing is left."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} cannot be empty")
    return cleaned
