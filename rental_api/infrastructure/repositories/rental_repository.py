"""
pymongo implementation of the Rental Repository.
"""

from datetime import datetime
from typing import Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from rental_api.domain.models.rental import Rental
from rental_api.domain.repositories.rental_repository import RentalRepository
from rental_api.infrastructure.repositories.base_repository import MongoRepository


class MongoRentalRepository(MongoRepository[Rental], RentalRepository):
    """Rental repository implementation using pymongo."""

    @staticmethod
    def _pair(customer_id: ObjectId, movie_id: ObjectId) -> dict:
        return {"customer._id": customer_id, "movie._id": movie_id}

    def find_open(self, customer_id: ObjectId, movie_id: ObjectId) -> Optional[Rental]:
        query = {**self._pair(customer_id, movie_id), "dateReturned": None}
        return self._load(self.collection.find_one(query))

    def find_latest(self, customer_id: ObjectId, movie_id: ObjectId) -> Optional[Rental]:
        return self._load(
            self.collection.find_one(
                self._pair(customer_id, movie_id),
                sort=[("dateOut", DESCENDING)],
            )
        )

    def mark_returned(self, id: ObjectId, date_returned: datetime, rental_fee: float) -> Optional[Rental]:
        # Matching on dateReturned makes the stamp a compare-and-set
        document = self.collection.find_one_and_update(
            {"_id": id, "dateReturned": None},
            {"$set": {"dateReturned": date_returned, "rentalFee": rental_fee}},
            return_document=ReturnDocument.AFTER,
        )
        return self._load(document)
