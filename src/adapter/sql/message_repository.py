"""SQL implementation of MessageRepository.

Both queries LEFT JOIN the counterpart so a message survives a missing
user row, and order by sent_at then id so results are stable.
"""

from typing import Any

from adapter.sql.connection import MESSAGES_TABLE_NAME, USERS_TABLE_NAME
from adapter.sql.rows import as_datetime, contact_from_row
from domain.model.message import ReceivedMessage, SentMessage
from port.query_executor import QueryExecutor

_SENT_QUERY = f"""
    SELECT m.id, m.body, m.sent_at, m.read_at,
           u.username, u.first_name, u.last_name, u.phone
    FROM {MESSAGES_TABLE_NAME} AS m
    LEFT JOIN {USERS_TABLE_NAME} AS u ON m.to_username = u.username
    WHERE m.from_username = $1
    ORDER BY m.sent_at, m.id
"""

_RECEIVED_QUERY = f"""
    SELECT m.id, m.body, m.sent_at, m.read_at,
           u.username, u.first_name, u.last_name, u.phone
    FROM {MESSAGES_TABLE_NAME} AS m
    LEFT JOIN {USERS_TABLE_NAME} AS u ON m.from_username = u.username
    WHERE m.to_username = $1
    ORDER BY m.sent_at, m.id
"""


class SqlMessageRepository:
    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    @staticmethod
    def _fields(row: dict[str, Any]) -> dict[str, Any]:
        return {
            'id': row['id'],
            'body': row['body'],
            'sent_at': as_datetime(row['sent_at']),
            'read_at': as_datetime(row.get('read_at')),
        }

    def list_sent(self, username: str) -> list[SentMessage]:
        rows = self.executor.execute(_SENT_QUERY, [username])
        return [SentMessage(**self._fields(row), to_user=contact_from_row(row)) for row in rows]

    def list_received(self, username: str) -> list[ReceivedMessage]:
        rows = self.executor.execute(_RECEIVED_QUERY, [username])
        return [ReceivedMessage(**self._fields(row), from_user=contact_from_row(row)) for row in rows]
