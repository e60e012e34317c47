"""Read-only message views: a user's outbox and inbox.

Both are side-effect free and return an empty list when there is
nothing to show.
"""

from domain.model.message import ReceivedMessage, SentMessage
from port.message_repository import MessageRepository


def messages_from(repo: MessageRepository, username: str) -> list[SentMessage]:
    """Messages sent by username, oldest first, each with its recipient as to_user."""
    return repo.list_sent(username)


def messages_to(repo: MessageRepository, username: str) -> list[ReceivedMessage]:
    """Messages sent to username, oldest first, each with its sender as from_user."""
    return repo.list_received(username)
