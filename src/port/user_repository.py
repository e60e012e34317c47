from typing import Protocol

from domain.model.user import CredentialRecord, UserProfile


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> CredentialRecord:
        """Insert a new user stamped with the current time.

        Raises DuplicateUsernameError if the username is taken.
        """
        ...

    def get_password_hash(self, username: str) -> str | None:
        """Return the stored password hash, or None if the user does not exist."""
        ...

    def get_by_username(self, username: str) -> UserProfile | None:
        """Find a user by username. Return UserProfile or None if not found."""
        ...

    def list_all(self) -> list[UserProfile]:
        """Return every user's public profile, ordered by username."""
        ...

    def update_last_login(self, username: str) -> bool:
        """Set last_login_at to now. Return True if a row was updated."""
        ...
