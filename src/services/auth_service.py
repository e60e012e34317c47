"""Auth service — registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import os
from logging import getLogger

import bcrypt

from domain.model.errors import ValidationError
from domain.model.user import CredentialRecord
from port.user_repository import UserRepository

logger = getLogger(__name__)

# Cost factor (2^rounds iterations). Tunable, not a secret.
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# bcrypt only reads the first 72 bytes; bcrypt>=5 rejects anything longer.
MAX_PASSWORD_BYTES = 72


def _too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def _hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def register(
    repo: UserRepository,
    username: str | None,
    password: str | None,
    first_name: str | None,
    last_name: str | None,
    phone: str | None,
) -> CredentialRecord:
    """Register a new user.

    Returns the stored credential record (the password as a bcrypt hash).

    Raises:
        ValidationError: a required field is missing or empty, or the
            password exceeds MAX_PASSWORD_BYTES
        DuplicateUsernameError: username already registered
        InfrastructureError: the store failed
    """
    if not all([username, password, first_name, last_name, phone]):
        raise ValidationError("Please complete all required fields")
    if _too_long(password):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    password_hash = _hash_password(password)
    return repo.create(
        username=username,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
    )


def authenticate(repo: UserRepository, username: str, password: str) -> bool:
    """Check a username/password pair.

    Unknown usernames and wrong passwords both return False, so callers
    cannot tell which usernames exist. On success the user's
    last_login_at is refreshed.

    Raises:
        InfrastructureError: the store failed
    """
    if _too_long(password):
        # Registration never accepts these, so no stored hash can match.
        return False

    password_hash = repo.get_password_hash(username)
    if not password_hash:
        return False

    try:
        verified = _verify_password(password, password_hash)
    except ValueError:
        logger.warning("Stored password hash is malformed", extra={"username": username})
        return False

    if not verified:
        return False

    _update_login_timestamp(repo, username)
    return True


def _update_login_timestamp(repo: UserRepository, username: str) -> None:
    repo.update_last_login(username)
