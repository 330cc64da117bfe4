from typing import Any, Iterable
from uuid import UUID

from app.core.exceptions import NotFoundError, ValidationError


def require_text(value: str | None, entity: str, field: str = "name") -> str:
    if value is None or not value.strip():
        raise ValidationError(
            details=f"{entity} {field} is required and cannot be empty",
            field=field,
        )
    return value


def require_value(value: Any, entity: str, field: str) -> Any:
    if value is None:
        raise ValidationError(details=f"{entity} {field} is required", field=field)
    return value


def optional_text(value: str | None) -> str | None:
    return value if value else None


def parse_reference_id(value: str | None, label: str) -> UUID:
    """Parse a foreign-key id sent by the client; malformed ids are a 400."""
    field = f"{label}_id"
    if value is None:
        raise ValidationError(f"Invalid {label} ID format", details=f"{field} is required", field=field)
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"Invalid {label} ID format",
            details=f"'{value}' is not a valid UUID",
            field=field,
        ) from None


def parse_path_id(value: str, entity: str) -> UUID:
    # A malformed id can't match any row
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(f"{entity} not found") from None


def merge_changes(instance: Any, changes: dict[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    return {field: changes[field] if field in changes else getattr(instance, field) for field in fields}
