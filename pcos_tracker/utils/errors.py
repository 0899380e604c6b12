from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base error raised by services and stores, rendered by the HTTP layer."""

    code = "SERVICE_ERROR"
    status = 400

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class ValidationError(ServiceError):
    code = "VALIDATION_ERROR"
    status = 400


class ConflictError(ServiceError):
    code = "CONFLICT"
    status = 409


__all__ = ["ServiceError", "NotFoundError", "ValidationError", "ConflictError"]
