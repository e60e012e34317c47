"""SQLAlchemy implementation of QueryExecutor."""

import re
from datetime import datetime, timezone
from logging import getLogger
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from domain.model.errors import DuplicateError, InfrastructureError

logger = getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")

# SQLSTATE for unique_violation (PostgreSQL)
_UNIQUE_VIOLATION = '23505'


def _bind(statement: str, params: Sequence[Any]) -> tuple[TextClause, dict[str, Any]]:
    """Rewrite $N placeholders into named binds understood by sqlalchemy.text()."""
    sql = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", statement)
    values = {f"p{i}": value for i, value in enumerate(params, start=1)}
    return text(sql), values


def _as_sqlite_text(value: Any) -> Any:
    """SQLite has no timestamp type: bind datetimes as sortable ISO-8601 text in UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.isoformat(sep=' ')
    return value


def _is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    code = getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)
    if code == _UNIQUE_VIOLATION:
        return True
    message = str(orig).lower()
    return 'unique' in message or 'duplicate' in message


class SqlAlchemyQueryExecutor:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._datetimes_as_text = engine.dialect.name == 'sqlite'

    def execute(self, statement: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        clause, values = _bind(statement, params)
        if self._datetimes_as_text:
            values = {key: _as_sqlite_text(value) for key, value in values.items()}
        try:
            with self.engine.begin() as conn:
                result = conn.execute(clause, values)
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings()]
        except IntegrityError as e:
            if _is_unique_violation(e):
                logger.warning("Unique constraint violated", extra={"error": str(e.orig)})
                raise DuplicateError("Unique constraint violated") from e
            logger.error("Integrity error", extra={"error": str(e.orig)})
            raise InfrastructureError("Query failed") from e
        except SQLAlchemyError as e:
            logger.error("Query failed", extra={"error": str(e)})
            raise InfrastructureError("Query failed") from e
