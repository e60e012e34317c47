"""Schema bootstrap for the users and messages tables.

CREATE ... IF NOT EXISTS throughout, so it is safe to run on every startup.
"""

from logging import getLogger

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from adapter.sql.connection import MESSAGES_TABLE_NAME, USERS_TABLE_NAME
from domain.model.errors import InfrastructureError

logger = getLogger(__name__)

_USERS_DDL = f"""
    CREATE TABLE IF NOT EXISTS {USERS_TABLE_NAME} (
        username TEXT PRIMARY KEY,
        password TEXT NOT NULL,
        first_name TEXT NOT NULL,
        last_name TEXT NOT NULL,
        phone TEXT NOT NULL,
        join_at TIMESTAMPTZ NOT NULL,
        last_login_at TIMESTAMPTZ
    )
"""

_MESSAGES_DDL = f"""
    CREATE TABLE IF NOT EXISTS {MESSAGES_TABLE_NAME} (
        id {{id_column}},
        from_username TEXT NOT NULL REFERENCES {USERS_TABLE_NAME},
        to_username TEXT NOT NULL REFERENCES {USERS_TABLE_NAME},
        body TEXT NOT NULL,
        sent_at TIMESTAMPTZ NOT NULL,
        read_at TIMESTAMPTZ
    )
"""

_INDEXES = [
    f"CREATE INDEX IF NOT EXISTS idx_messages_from_sent ON {MESSAGES_TABLE_NAME} (from_username, sent_at)",
    f"CREATE INDEX IF NOT EXISTS idx_messages_to_sent ON {MESSAGES_TABLE_NAME} (to_username, sent_at)",
]


def _id_column(engine: Engine) -> str:
    if engine.dialect.name == 'sqlite':
        return 'INTEGER PRIMARY KEY AUTOINCREMENT'
    return 'SERIAL PRIMARY KEY'


def ensure_schema(engine: Engine) -> None:
    """Create the users and messages tables and their indexes if missing.

    Raises:
        InfrastructureError: the DDL could not be applied
    """
    try:
        with engine.begin() as conn:
            conn.execute(text(_USERS_DDL))
            conn.execute(text(_MESSAGES_DDL.format(id_column=_id_column(engine))))
            for index in _INDEXES:
                conn.execute(text(index))
    except SQLAlchemyError as e:
        logger.error("Failed to create schema", extra={"error": str(e)})
        raise InfrastructureError("Failed to create schema") from e
