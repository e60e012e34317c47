"""User lookups for the HTTP layer."""

from domain.model.errors import NotFoundError
from domain.model.user import UserProfile
from port.user_repository import UserRepository


def all_users(repo: UserRepository) -> list[UserProfile]:
    """Every user's public profile, ordered by username. Unpaginated."""
    return repo.list_all()


def get_user(repo: UserRepository, username: str) -> UserProfile:
    """Return one user's public profile.

    Raises:
        NotFoundError: no user with this username
    """
    user = repo.get_by_username(username)
    if not user:
        raise NotFoundError("User not found")
    return user
