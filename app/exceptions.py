from typing import Any, Mapping, Optional


class PatternsError(Exception):
    """Base for application errors.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: optional machine-readable error code
    """

    default_message = "Application error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(PatternsError):
    """Raised when a precondition for a service call is not met, e.g. checkout without a payment strategy."""

    default_message = "Invalid input"


class DatabaseConnectionError(PatternsError):
    """Raised when an operation needs an open database connection and there is none."""

    default_message = "Database connection is not available"
