"""
pymongo implementation of the User Repository.
"""

from typing import Optional

from rental_api.domain.models.user import User
from rental_api.domain.repositories.user_repository import UserRepository
from rental_api.infrastructure.repositories.base_repository import MongoRepository


class MongoUserRepository(MongoRepository[User], UserRepository):
    """User repository implementation using pymongo."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self._load(self.collection.find_one({"email": email}))
