"""
pymongo implementation of the Movie Repository.
"""

from typing import Optional

from bson import ObjectId
from pymongo import ReturnDocument

from rental_api.domain.models.movie import Movie
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.infrastructure.repositories.base_repository import MongoRepository


class MongoMovieRepository(MongoRepository[Movie], MovieRepository):
    """Movie repository implementation using pymongo."""

    def increment_stock(self, id: ObjectId, amount: int = 1) -> Optional[Movie]:
        document = self.collection.find_one_and_update(
            {"_id": id},
            {"$inc": {"numberInStock": amount}},
            return_document=ReturnDocument.AFTER,
        )
        return self._load(document)

    def take_from_stock(self, id: ObjectId) -> Optional[Movie]:
        document = self.collection.find_one_and_update(
            {"_id": id, "numberInStock": {"$gt": 0}},
            {"$inc": {"numberInStock": -1}},
            return_document=ReturnDocument.AFTER,
        )
        return self._load(document)
