import logging
from uuid import UUID

from app.logging_config import STORE_LOGGER_NAME

store_logger = logging.getLogger(STORE_LOGGER_NAME)


def log_store_error(entity: str, operation: str, error: Exception, entity_id: UUID | None = None):
    store_logger.error(
        "STORE_ERROR",  # ← this is just a label
        extra={
            "entity": entity,
            "operation": operation,
            "entity_id": str(entity_id) if entity_id else None,
            "error_type": type(error).__name__,
            "error": str(getattr(error, "orig", None) or error),
        }
    )
