"""
Singleton accessor for the student database.

One connection is opened when the instance is first created and stays open
until close(). Failures are logged with their stack trace and the caller gets
a default result back.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import DatabaseConnectionError
from core.base.singleton import Singleton
from domain.models.database import create_db_engine

logger = logging.getLogger("patterns.database")


def format_value(value: Any) -> str:
    return "null" if value is None else str(value)


def format_row(values: Iterable[Any]) -> str:
    """Render values as one console line, each value followed by a tab"""
    return "".join(f"{format_value(value)}\t" for value in values)


class DatabaseConnection(Singleton):
    """Process-wide database connection"""

    def __init__(
        self,
        url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ):
        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None
        try:
            self._engine = create_db_engine(url, username, password)
            self._connection = self._engine.connect()
            logger.info("Database connection opened")
        except (SQLAlchemyError, ImportError):
            logger.exception("Could not open database connection")

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.closed

    def require_connection(self) -> Connection:
        """Return the open connection or raise DatabaseConnectionError"""
        if not self.is_connected:
            raise DatabaseConnectionError()
        return self._connection

    def query(self, sql: str) -> List[Dict[str, Any]]:
        """
        Run a statement and print its result set.

        Column names are printed on the first line, then one line per row,
        every value followed by a tab.

        Returns:
            Rows as dicts, or an empty list if the statement failed
        """
        try:
            connection = self.require_connection()
            result = connection.exec_driver_sql(sql)
            columns = list(result.keys())
            print(format_row(columns))

            rows = []
            for row in result:
                print(format_row(row))
                rows.append(dict(zip(columns, row)))
            return rows
        except (SQLAlchemyError, DatabaseConnectionError):
            logger.exception("Query failed: %s", sql.strip())
            self._rollback()
        return []

    def update(self, sql: str) -> int:
        """
        Run a data-modifying statement and commit it.

        Returns:
            Number of affected rows, 0 if the statement failed
        """
        try:
            connection = self.require_connection()
            result = connection.exec_driver_sql(sql)
            connection.commit()
            affected = max(result.rowcount, 0)
            logger.debug("Update affected %d rows", affected)
            return affected
        except (SQLAlchemyError, DatabaseConnectionError):
            logger.exception("Update failed: %s", sql.strip())
            self._rollback()
        return 0

    def close(self) -> None:
        """Close the connection and release the engine"""
        try:
            if self.is_connected:
                self._connection.close()
                logger.info("Database connection closed")
            if self._engine is not None:
                self._engine.dispose()
        except SQLAlchemyError:
            logger.exception("Error closing database connection")
        finally:
            self._connection = None
            self._engine = None

    def _rollback(self) -> None:
        if not self.is_connected:
            return
        try:
            self._connection.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")
