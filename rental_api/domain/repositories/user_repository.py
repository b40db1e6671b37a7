"""
User Repository Interface.
"""

from typing import Optional

from rental_api.domain.models.user import User
from rental_api.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        ...
