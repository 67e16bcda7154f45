"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, get_settings
from app.exceptions import (
    PatternsError,
    ServiceValidationError,
    DatabaseConnectionError,
)

__all__ = [
    "settings",
    "get_settings",
    "PatternsError",
    "ServiceValidationError",
    "DatabaseConnectionError",
]
