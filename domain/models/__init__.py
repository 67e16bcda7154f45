"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    build_database_url,
    create_db_engine,
    init_database,
)
from domain.models.student import Student

__all__ = [
    # Database
    "Base",
    "build_database_url",
    "create_db_engine",
    "init_database",
    # Student models
    "Student",
]
