"""Read projections over the messages relation.

Messages are written by a sibling component; this package only
materializes them, joined to the counterpart's public contact.
"""

from dataclasses import dataclass
from datetime import datetime

from domain.model.user import PublicContact


@dataclass(frozen=True)
class SentMessage:
    """A message as seen in its sender's outbox (Value Object)."""
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: PublicContact


@dataclass(frozen=True)
class ReceivedMessage:
    """A message as seen in its recipient's inbox (Value Object)."""
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: PublicContact
