#!/usr/bin/env python3
"""
Standalone student database initialization script
Creates the students table and seeds sample rows for the students demo
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from domain.models import Student, create_db_engine, init_database

logger = logging.getLogger("patterns.init_db")

SAMPLE_STUDENTS = [
    {"student_id": 1, "full_name": "Nguyen Van An", "email": "an.nguyen@example.com", "phone": "0912345678"},
    {"student_id": 2, "full_name": "Tran Thi Binh", "email": "binh.tran@example.com", "phone": "0987654321"},
    {"student_id": 3, "full_name": "Le Hoang Cuong", "email": "cuong.le@example.com", "phone": "0905123456"},
]


def seed_students(engine: Engine, students: Optional[List[dict]] = None) -> int:
    """
    Insert sample students, skipping ids that already exist.

    Returns:
        Number of students inserted
    """
    students = SAMPLE_STUDENTS if students is None else students
    Session = sessionmaker(bind=engine, future=True)
    inserted = 0
    with Session.begin() as session:
        for data in students:
            if session.get(Student, data["student_id"]) is not None:
                logger.info("Student %s already exists, skipping", data["student_id"])
                continue
            session.add(Student(**data))
            inserted += 1
    logger.info("Seeded %d students", inserted)
    return inserted


def main(engine: Optional[Engine] = None) -> int:
    engine = engine if engine is not None else create_db_engine()
    try:
        init_database(engine)
        tables = inspect(engine).get_table_names()
        logger.info("✓ Tables: %s", ", ".join(tables))
        seed_students(engine)
        return 0
    except SQLAlchemyError:
        logger.exception("✗ Failed to initialize student database")
        return 1
    finally:
        engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    print("\n" + "=" * 60)
    print("Student Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    print("\n" + "=" * 60)
    print("SUCCESS! The student database is ready." if exit_code == 0 else "FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)
