"""
pymongo implementation of the Base Repository.
"""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database

from rental_api.domain.models.base import DocumentModel
from rental_api.domain.repositories.base import BaseRepository, SortSpec

ModelType = TypeVar("ModelType", bound=DocumentModel)


class MongoRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository over one collection, one document model."""

    def __init__(self, db: Database, model: Type[ModelType]):
        self.db = db
        self.model = model
        self.collection = db[model.collection_name]

    def _load(self, document: Optional[Mapping[str, Any]]) -> Optional[ModelType]:
        if document is None:
            return None
        return self.model.from_document(document)

    def get_by_id(self, id: ObjectId) -> Optional[ModelType]:
        return self._load(self.collection.find_one({"_id": id}))

    def list(self, skip: int = 0, limit: int = 100, sort: Optional[SortSpec] = None) -> List[ModelType]:
        cursor = self.collection.find()
        if sort:
            cursor = cursor.sort(list(sort))
        cursor = cursor.skip(skip).limit(limit)
        return [self.model.from_document(doc) for doc in cursor]

    def create(self, obj_in: ModelType) -> ModelType:
        self.collection.insert_one(obj_in.to_document())
        return obj_in

    def update(self, id: ObjectId, changes: Mapping[str, Any]) -> Optional[ModelType]:
        document = self.collection.find_one_and_update(
            {"_id": id},
            {"$set": dict(changes)},
            return_document=ReturnDocument.AFTER,
        )
        return self._load(document)

    def delete(self, id: ObjectId) -> Optional[ModelType]:
        return self._load(self.collection.find_one_and_delete({"_id": id}))
