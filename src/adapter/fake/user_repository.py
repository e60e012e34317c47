"""In-memory implementation of UserRepository for testing."""

from datetime import datetime, timezone

from domain.model.errors import DuplicateUsernameError
from domain.model.user import CredentialRecord, User, UserProfile


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> CredentialRecord:
        if username in self.store:
            raise DuplicateUsernameError(username)

        now = datetime.now(timezone.utc)
        user = User(
            username=username,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            join_at=now,
            last_login_at=now,
        )
        self.store[username] = user
        return user.to_credential()

    def update_last_login(self, username: str) -> bool:
        user = self.store.get(username)
        if not user:
            return False

        user.last_login_at = datetime.now(timezone.utc)
        return True

    # ── read operations ──────────────────────────────────────

    def get_password_hash(self, username: str) -> str | None:
        user = self.store.get(username)
        return user.password_hash if user else None

    def get_by_username(self, username: str) -> UserProfile | None:
        user = self.store.get(username)
        return user.to_profile() if user else None

    def list_all(self) -> list[UserProfile]:
        return [self.store[name].to_profile() for name in sorted(self.store)]
