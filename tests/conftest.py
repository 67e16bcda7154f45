"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sqlalchemy import create_engine

from adapters.sql_adapter import DatabaseConnection
from domain.models import init_database
from scripts.init_db import seed_students


@pytest.fixture(autouse=True)
def reset_database_singleton():
    """Give every test a fresh DatabaseConnection singleton"""
    DatabaseConnection.reset_instance()
    yield
    if DatabaseConnection.has_instance():
        DatabaseConnection.get_instance().close()
    DatabaseConnection.reset_instance()


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """URL of an empty file-backed SQLite database"""
    return f"sqlite:///{tmp_path / 'qlsv.db'}"


@pytest.fixture
def students_db_url(sqlite_url) -> str:
    """URL of a SQLite database holding the students table with sample rows"""
    engine = create_engine(sqlite_url, future=True)
    init_database(engine)
    seed_students(engine)
    engine.dispose()
    return sqlite_url


@pytest.fixture
def db(students_db_url) -> DatabaseConnection:
    """DatabaseConnection singleton bound to the seeded test database"""
    return DatabaseConnection.get_instance(students_db_url)
