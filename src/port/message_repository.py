from typing import Protocol

from domain.model.message import ReceivedMessage, SentMessage


class MessageRepository(Protocol):
    """Protocol defining read access to messages joined with their counterpart user."""
    def list_sent(self, username: str) -> list[SentMessage]:
        """Messages sent by username, oldest first, with the recipient attached."""
        ...

    def list_received(self, username: str) -> list[ReceivedMessage]:
        """Messages sent to username, oldest first, with the sender attached."""
        ...
