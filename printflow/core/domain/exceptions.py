"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They should be caught and translated to appropriate HTTP responses in the API layer.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "UNKNOWN_STATUS")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for invalid entity states, value object creation failures, etc.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = "VALIDATION_ERROR",
    ):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code, details)
        self.field = field


class MalformedInputException(ValidationException):
    """Raised when a pricing request carries a non-positive quantity."""

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(
            f"Quantity must be greater than zero, got {quantity}",
            field="quantity",
            details={"quantity": quantity},
            code="MALFORMED_INPUT",
        )


class UnknownStatusException(ValidationException):
    """Raised when a status is not part of the workflow catalog."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(
            f"Unknown workflow status: '{status}'",
            field="status",
            details={"status": status},
            code="UNKNOWN_STATUS",
        )


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class PersistenceException(DomainException):
    """
    Raised when the backend rejects a write.

    Local state is left untouched so the caller can revert any optimistic
    update and retry.
    """

    def __init__(self, order_id: Any, status: str, reason: str | None = None):
        self.order_id = order_id
        self.status = status
        self.reason = reason
        self.retryable = True
        details: dict[str, Any] = {
            "order_id": str(order_id),
            "status": status,
            "retryable": True,
        }
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Failed to persist status '{status}' for order {order_id}",
            "PERSISTENCE_ERROR",
            details,
        )


class IntegrationException(DomainException):
    """Raised when an external integration fails."""

    def __init__(self, service: str, message: str, original_error: Exception | None = None):
        self.service = service
        self.original_error = original_error
        details: dict[str, Any] = {"service": service}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "INTEGRATION_ERROR", details)
