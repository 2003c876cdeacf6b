"""User repository port."""

from roadready.application.ports.repository import Repository
from roadready.domain.entities.user import User


class UserRepository(Repository[User]):
    """Port interface for user repository."""
