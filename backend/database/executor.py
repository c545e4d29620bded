# backend/database/executor.py
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.sql import ClauseElement

from database.errors import DatabaseConnectionError
from database.session import dispose_engine, get_engine
from queries.sql_template import render_literal

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rows_affected: List[int] = field(default_factory=list)

    @property
    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None

    @property
    def affected(self) -> int:
        return self.rows_affected[0] if self.rows_affected else 0


class QueryExecutor:
    """Runs one statement per call against the shared pool.

    An executor returned by ``transaction()`` is bound to a single connection
    and must not be shared across threads.
    """

    def __init__(self, engine_factory: Callable[[], Engine] = get_engine,
                 connection: Optional[Connection] = None):
        self._engine_factory = engine_factory
        self._connection = connection

    def _connect(self) -> Connection:
        try:
            return self._engine_factory().connect()
        except (DBAPIError, RuntimeError) as e:
            logger.error("Database connection failed: %s", e)
            raise DatabaseConnectionError(f"Database connection failed: {e}") from e

    def execute(self, statement: Union[str, ClauseElement],
                params: Optional[Mapping[str, Any]] = None) -> QueryResult:
        if isinstance(statement, str):
            statement = text(statement)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Executing query: %s", render_literal(statement, params))

        if self._connection is not None:
            result = self._run(self._connection, statement, params)
        else:
            with self._connect() as conn:
                result = self._run(conn, statement, params)
                conn.commit()

        logger.debug("Query result: rows=%d rowsAffected=%s", len(result.rows), result.rows_affected)
        return result

    @staticmethod
    def _run(conn: Connection, statement: ClauseElement,
             params: Optional[Mapping[str, Any]]) -> QueryResult:
        res = conn.execute(statement, dict(params) if params else None)
        if res.returns_rows:
            rows = [dict(row) for row in res.mappings().all()]
            return QueryResult(rows=rows, rows_affected=[len(rows)])
        return QueryResult(rows=[], rows_affected=[max(res.rowcount, 0)])

    @contextmanager
    def transaction(self) -> Iterator["QueryExecutor"]:
        """Unit of work: commit when the block exits, roll back on any error."""
        if self._connection is not None:
            yield self
            return

        conn = self._connect()
        try:
            with conn.begin():
                yield QueryExecutor(self._engine_factory, connection=conn)
        except Exception:
            logger.warning("Transaction rolled back")
            raise
        finally:
            conn.close()

    def test_connection(self) -> bool:
        try:
            self.execute("SELECT 1")
            return True
        except (DatabaseConnectionError, DBAPIError) as e:
            logger.error("Database check failed: %s", e)
            return False

    def close_connection(self) -> None:
        if self._engine_factory is get_engine:
            dispose_engine()
        else:
            self._engine_factory().dispose()


_executor: Optional[QueryExecutor] = None


def get_executor() -> QueryExecutor:
    """FastAPI dependency returning the process-wide executor."""
    global _executor
    if _executor is None:
        _executor = QueryExecutor()
    return _executor
