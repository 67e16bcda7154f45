"""Tests for the student database initialization script"""

from sqlalchemy import create_engine, inspect, text

from scripts.init_db import SAMPLE_STUDENTS, main, seed_students
from domain.models import init_database


def test_main_creates_and_seeds(sqlite_url):
    engine = create_engine(sqlite_url, future=True)

    assert main(engine) == 0

    engine = create_engine(sqlite_url, future=True)
    assert "students" in inspect(engine).get_table_names()
    with engine.connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM students")).scalar_one()
    assert count == len(SAMPLE_STUDENTS)
    engine.dispose()


def test_seed_is_idempotent(sqlite_url):
    engine = create_engine(sqlite_url, future=True)
    init_database(engine)

    assert seed_students(engine) == len(SAMPLE_STUDENTS)
    assert seed_students(engine) == 0
    engine.dispose()
