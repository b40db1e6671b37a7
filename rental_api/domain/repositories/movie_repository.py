"""
Movie Repository Interface.
Stock counters are changed with atomic single-document updates.
"""

from typing import Optional

from bson import ObjectId

from rental_api.domain.models.movie import Movie
from rental_api.domain.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """Interface for Movie-specific operations."""

    def increment_stock(self, id: ObjectId, amount: int = 1) -> Optional[Movie]:
        """Add `amount` to numberInStock."""
        ...

    def take_from_stock(self, id: ObjectId) -> Optional[Movie]:
        """Decrement numberInStock if it is above zero; None when nothing was taken."""
        ...
