from typing import Optional


class InventoryError(Exception):
    """Base class for errors that end up in the JSON error envelope."""

    status_code = 500
    default_error = "An unexpected error occurred"

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None, field: Optional[str] = None):
        self.error = error or self.default_error
        self.details = details
        self.field = field
        super().__init__(self.error)

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details:
            body["details"] = self.details
        if self.field:
            body["field"] = self.field
        return body


class ValidationError(InventoryError):
    status_code = 400
    default_error = "Validation failed"


class NotFoundError(InventoryError):
    status_code = 404
    default_error = "Not found"


class ConflictError(InventoryError):
    status_code = 409
    default_error = "Duplicate entry"


class InternalError(InventoryError):
    status_code = 500
