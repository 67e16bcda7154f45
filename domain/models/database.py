"""
Database configuration and engine construction.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.orm import declarative_base

from app.config import settings

logger = logging.getLogger("patterns.database")

# Create SQLAlchemy Base
Base = declarative_base()


def build_database_url(
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> URL:
    """
    Merge separate credentials into a protocol://host:port/database URL.

    Empty credentials leave the URL untouched. SQLite URLs never carry credentials.
    """
    db_url = make_url(url if url is not None else settings.database_url)
    if db_url.get_backend_name() == "sqlite":
        return db_url

    username = settings.database_user if username is None else username
    password = settings.database_password if password is None else password
    if username:
        db_url = db_url.set(username=username)
    if password:
        db_url = db_url.set(password=password)
    return db_url


def create_db_engine(
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> Engine:
    """Create an engine for the configured database"""
    db_url = build_database_url(url, username, password)
    logger.debug("Creating engine for %s", db_url.render_as_string(hide_password=True))
    return create_engine(db_url, echo=settings.db_echo, future=True)


def init_database(engine: Engine) -> None:
    """Initialize database schema"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")
