"""In-memory implementation of MessageRepository for testing.

Messages are seeded with add(), standing in for the component that sends them.
Counterparts are resolved against a FakeUserRepository, like the SQL LEFT JOIN.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from adapter.fake.user_repository import FakeUserRepository
from domain.model.message import ReceivedMessage, SentMessage
from domain.model.user import PublicContact

_MISSING_CONTACT = PublicContact(username=None, first_name=None, last_name=None, phone=None)


@dataclass
class _MessageRow:
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None = None


class FakeMessageRepository:
    def __init__(self, users: FakeUserRepository):
        self.users = users
        self.rows: list[_MessageRow] = []

    def add(
        self,
        from_username: str,
        to_username: str,
        body: str,
        sent_at: datetime | None = None,
        read_at: datetime | None = None,
    ) -> int:
        message_id = len(self.rows) + 1
        self.rows.append(_MessageRow(
            id=message_id,
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=sent_at or datetime.now(timezone.utc),
            read_at=read_at,
        ))
        return message_id

    def _contact(self, username: str) -> PublicContact:
        profile = self.users.get_by_username(username)
        return profile.to_contact() if profile else _MISSING_CONTACT

    def _ordered(self) -> list[_MessageRow]:
        return sorted(self.rows, key=lambda r: (r.sent_at, r.id))

    def list_sent(self, username: str) -> list[SentMessage]:
        return [
            SentMessage(
                id=r.id,
                body=r.body,
                sent_at=r.sent_at,
                read_at=r.read_at,
                to_user=self._contact(r.to_username),
            )
            for r in self._ordered()
            if r.from_username == username
        ]

    def list_received(self, username: str) -> list[ReceivedMessage]:
        return [
            ReceivedMessage(
                id=r.id,
                body=r.body,
                sent_at=r.sent_at,
                read_at=r.read_at,
                from_user=self._contact(r.from_username),
            )
            for r in self._ordered()
            if r.to_username == username
        ]
