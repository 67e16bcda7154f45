"""
Adapters package - External service connections.
Database adapter for the student database.
"""

from adapters import sql_adapter
from adapters.sql_adapter import DatabaseConnection

__all__ = [
    "sql_adapter",
    "DatabaseConnection",
]
