"""
Domain Layer - Core DDD building blocks

This module provides the shared domain building blocks:
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from printflow.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    IntegrationException,
    MalformedInputException,
    PersistenceException,
    UnknownStatusException,
    ValidationException,
)
from printflow.core.domain.value_objects import (
    MINOR_UNIT,
    Percentage,
    StatusEnum,
    ValueObject,
    round_money,
)

__all__ = [
    # Value Objects
    "ValueObject",
    "Percentage",
    "StatusEnum",
    "MINOR_UNIT",
    "round_money",
    # Exceptions
    "DomainException",
    "ValidationException",
    "MalformedInputException",
    "UnknownStatusException",
    "EntityNotFoundException",
    "PersistenceException",
    "IntegrationException",
]
