"""Helpers shared by the resource services."""

from typing import Optional, TypeVar

from bson import ObjectId

from rental_api.core.exceptions import EntityNotFoundException
from rental_api.domain.repositories.base import BaseRepository

T = TypeVar("T")


def get_or_404(repo: BaseRepository[T], id: ObjectId, message: str) -> T:
    entity: Optional[T] = repo.get_by_id(id)
    if entity is None:
        raise EntityNotFoundException(message, details={"id": str(id)})
    return entity


def found_or_404(entity: Optional[T], id: ObjectId, message: str) -> T:
    if entity is None:
        raise EntityNotFoundException(message, details={"id": str(id)})
    return entity
