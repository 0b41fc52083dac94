"""
Error types shared by repositories, services and routers.

Every error carries an HTTP status and a stable code; `to_response()` gives the
JSON envelope returned to clients:

    {"error": {"code": "...", "message": "...", "details": [...]}}
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    code = "API_ERROR"
    http_status = 500

    def __init__(self, message: str, *, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_response(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class ValidationError(ApiError):
    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str, *, field: str | None = None) -> None:
        details = [{"field": field, "message": message}] if field else None
        super().__init__(message, details=details)
        self.field = field


class NotFoundError(ApiError):
    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} not found.", details=[{"id": entity_id}])
        self.entity = entity
        self.entity_id = entity_id


class StoreError(ApiError):
    """
    Persistence failure. Driver messages are never exposed to clients.
    """

    code = "STORE_ERROR"
    http_status = 500

    def __init__(self, message: str = "Database operation failed.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ConstraintViolationError(StoreError):
    code = "CONSTRAINT_VIOLATION"
    http_status = 409

    def __init__(self, constraint: str | None = None) -> None:
        details = [{"constraint": constraint}] if constraint else None
        super().__init__("Operation violates a data constraint.", details=details)
        self.constraint = constraint
