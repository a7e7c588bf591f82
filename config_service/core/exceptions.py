"""Domain errors raised by the repositories and lookup dependencies.

Each error carries the HTTP status and the ``error`` label used in the
``{"error": ..., "message": ...}`` body rendered by the handlers in
``config_service.main``.
"""
from fastapi import status


class ConfigServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"error": self.error, "message": self.message}


class ResourceNotFoundError(ConfigServiceError):
    """Environment or variable does not exist in scope."""
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"


class ResourceValidationError(ConfigServiceError):
    """Missing required field or a uniqueness constraint rejected by the store."""
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Validation Error"
