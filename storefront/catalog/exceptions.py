"""Catalog exceptions.

Errors raised by the catalog service. Endpoints map them to HTTP
status codes: NotFoundError to 404, RetrievalError to 500.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(CatalogError):
    """Raised when a singular lookup matches no row."""

    def __init__(self, entity_type: str, key: str, value: str) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "Category").
            key: Lookup column.
            value: Lookup value.
        """
        super().__init__(
            f"{entity_type} not found",
            details={"entity_type": entity_type, key: value},
        )


class RetrievalError(CatalogError):
    """Raised when the underlying data store query fails."""

    def __init__(self, collection: str, operation: str, reason: str) -> None:
        """Initialize retrieval error.

        Args:
            collection: Collection being queried.
            operation: "fetch" or "count".
            reason: Underlying failure message.
        """
        super().__init__(
            f"Failed to {operation} {collection}: {reason}",
            details={"collection": collection, "operation": operation},
        )
        self.collection = collection
        self.operation = operation
