"""Snowflake connection shared by the Snowflake-backed stores.

The stores in ``snowflake_stores`` talk to the ``users``, ``questions``,
``surveys``, ``daily_scores`` and ``alerts`` tables through this one
service. Each statement runs on its own cursor and commits on success.
"""
import logging
from contextlib import contextmanager
from typing import Any, Generator, Optional

import snowflake.connector
from snowflake.connector import SnowflakeConnection
from snowflake.connector.cursor import SnowflakeCursor

from pulse.config import get_settings

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class SnowflakeService:
    """Lazily opened connection plus query helpers returning dict rows."""

    def __init__(self):
        self.settings = get_settings()
        self._connection: Optional[SnowflakeConnection] = None

    def _get_connection_params(self) -> dict[str, Any]:
        return {
            "account": self.settings.snowflake_account,
            "user": self.settings.snowflake_user,
            "password": self.settings.snowflake_password,
            "database": self.settings.snowflake_database,
            "schema": self.settings.snowflake_schema,
            "warehouse": self.settings.snowflake_warehouse,
        }

    def connect(self) -> SnowflakeConnection:
        """Open the connection on first use, or after it was closed."""
        if self._connection is None or self._connection.is_closed():
            logger.info(
                f"Connecting to Snowflake {self.settings.snowflake_database}."
                f"{self.settings.snowflake_schema}"
            )
            self._connection = snowflake.connector.connect(
                **self._get_connection_params()
            )
        return self._connection

    def disconnect(self) -> None:
        if self._connection and not self._connection.is_closed():
            self._connection.close()
            self._connection = None

    @contextmanager
    def cursor(self) -> Generator[SnowflakeCursor, None, None]:
        """Cursor that commits when the block succeeds and rolls back otherwise."""
        conn = self.connect()
        cur = conn.cursor()
        try:
            yield cur
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Snowflake statement failed: {e}")
            raise
        finally:
            cur.close()

    async def health_check(self) -> tuple[bool, Optional[str]]:
        """Run ``SELECT 1``; returns (healthy, error message)."""
        try:
            with self.cursor() as cur:
                cur.execute("SELECT 1")
                return cur.fetchone() is not None, None
        except Exception as e:
            return False, str(e)

    def execute_query(self, query: str, params: Optional[tuple] = None) -> list[Row]:
        """Rows as dicts keyed by lower-cased column name."""
        with self.cursor() as cur:
            cur.execute(query, params)
            columns = [desc[0].lower() for desc in cur.description] if cur.description else []
            return [dict(zip(columns, row)) for row in cur.fetchall()]

    def execute_one(self, query: str, params: Optional[tuple] = None) -> Optional[Row]:
        rows = self.execute_query(query, params)
        return rows[0] if rows else None

    def execute_write(self, query: str, params: Optional[tuple] = None) -> int:
        """Run an INSERT, UPDATE or DELETE and return the affected row count."""
        with self.cursor() as cur:
            cur.execute(query, params)
            return cur.rowcount


_snowflake_service: Optional[SnowflakeService] = None


def get_snowflake_service() -> SnowflakeService:
    """Process-wide Snowflake service."""
    global _snowflake_service
    if _snowflake_service is None:
        _snowflake_service = SnowflakeService()
    return _snowflake_service
