"""
Error hierarchy raised by the domain integrity layer.

Every error carries a stable ``code`` so the presentation layer can map it
to a transport status without inspecting messages.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for every rule violation detected before a mutation."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    """A referenced record (self or parent) does not exist."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found", {"entity": entity, "id": entity_id})


class ConflictError(DomainError):
    """A unique value is already held by another record."""

    code = "CONFLICT"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class ValidationError(DomainError):
    """Submitted values break a field-level rule."""

    code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message, {"field": field})
