"""
Rental Repository Interface.
"""

from datetime import datetime
from typing import Optional

from bson import ObjectId

from rental_api.domain.models.rental import Rental
from rental_api.domain.repositories.base import BaseRepository


class RentalRepository(BaseRepository[Rental]):
    """Interface for Rental-specific operations."""

    def find_open(self, customer_id: ObjectId, movie_id: ObjectId) -> Optional[Rental]:
        """Get the rental of this movie by this customer that has not been returned."""
        ...

    def find_latest(self, customer_id: ObjectId, movie_id: ObjectId) -> Optional[Rental]:
        """Get the most recent rental for the pair, returned or not."""
        ...

    def mark_returned(self, id: ObjectId, date_returned: datetime, rental_fee: float) -> Optional[Rental]:
        """Stamp an open rental; None if it was not open any more."""
        ...
