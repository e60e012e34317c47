"""SQL implementation of UserRepository."""

from datetime import datetime, timezone
from logging import getLogger
from typing import Any

from adapter.sql.connection import USERS_TABLE_NAME
from adapter.sql.rows import as_datetime
from domain.model.errors import DuplicateError, DuplicateUsernameError, InfrastructureError
from domain.model.user import CredentialRecord, UserProfile
from port.query_executor import QueryExecutor

logger = getLogger(__name__)

_PROFILE_COLUMNS = "username, first_name, last_name, phone, join_at, last_login_at"


class SqlUserRepository:
    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def _to_domain(self, row: dict[str, Any]) -> UserProfile:
        """Convert a users row to the UserProfile domain model."""
        return UserProfile(
            username=row['username'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            phone=row['phone'],
            join_at=as_datetime(row['join_at']),
            last_login_at=as_datetime(row.get('last_login_at')),
        )

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> CredentialRecord:
        """Insert a new user and return the stored credential record."""
        try:
            rows = self.executor.execute(
                f"""INSERT INTO {USERS_TABLE_NAME}
                    (username, password, first_name, last_name, phone, join_at, last_login_at)
                VALUES ($1, $2, $3, $4, $5, $6, $6)
                RETURNING username, password, first_name, last_name, phone""",
                [username, password_hash, first_name, last_name, phone, datetime.now(timezone.utc)],
            )
        except DuplicateError as e:
            logger.warning("User creation failed: username already exists", extra={"username": username})
            raise DuplicateUsernameError(username) from e

        if not rows:
            raise InfrastructureError("Insert returned no row")
        row = rows[0]
        logger.info("User created", extra={"username": username})
        return CredentialRecord(
            username=row['username'],
            password_hash=row['password'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            phone=row['phone'],
        )

    def get_password_hash(self, username: str) -> str | None:
        rows = self.executor.execute(
            f"SELECT password FROM {USERS_TABLE_NAME} WHERE username = $1",
            [username],
        )
        return rows[0]['password'] if rows else None

    def get_by_username(self, username: str) -> UserProfile | None:
        """Find a user by username. Return UserProfile or None if not found."""
        rows = self.executor.execute(
            f"SELECT {_PROFILE_COLUMNS} FROM {USERS_TABLE_NAME} WHERE username = $1",
            [username],
        )
        return self._to_domain(rows[0]) if rows else None

    def list_all(self) -> list[UserProfile]:
        rows = self.executor.execute(
            f"SELECT {_PROFILE_COLUMNS} FROM {USERS_TABLE_NAME} ORDER BY username"
        )
        return [self._to_domain(row) for row in rows]

    def update_last_login(self, username: str) -> bool:
        """Update the last login timestamp for a user. Return True if a row changed."""
        rows = self.executor.execute(
            f"""UPDATE {USERS_TABLE_NAME}
                SET last_login_at = $2
                WHERE username = $1
                RETURNING username""",
            [username, datetime.now(timezone.utc)],
        )
        if rows:
            logger.debug("Updated last_login_at", extra={"username": username})
            return True
        return False
