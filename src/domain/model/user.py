from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PublicContact:
    """Counterpart of a message, as shown to the other participant.

    Every field is None when the counterpart's user row is missing.
    """
    username: str | None
    first_name: str | None
    last_name: str | None
    phone: str | None


@dataclass(frozen=True)
class UserProfile:
    """Public profile of a user (no credential material)."""
    username: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None = None

    def to_contact(self) -> PublicContact:
        return PublicContact(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )


@dataclass(frozen=True)
class CredentialRecord:
    """Row returned by registration: the stored credential plus display fields."""
    username: str
    password_hash: str
    first_name: str
    last_name: str
    phone: str


@dataclass
class User:
    """Domain model representing a stored user row."""
    username: str
    password_hash: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None = None

    def to_profile(self) -> UserProfile:
        return UserProfile(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            join_at=self.join_at,
            last_login_at=self.last_login_at,
        )

    def to_credential(self) -> CredentialRecord:
        return CredentialRecord(
            username=self.username,
            password_hash=self.password_hash,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )
