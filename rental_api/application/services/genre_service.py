"""Genre service — CRUD over the genres collection."""

from typing import List

from bson import ObjectId

from rental_api.application.services.common import found_or_404, get_or_404
from rental_api.domain.models.genre import Genre
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.schemas.genre import GenreWrite

NOT_FOUND = "The genre with the given ID was not found."


def list_genres(repo: BaseRepository[Genre]) -> List[Genre]:
    return repo.list(limit=0, sort=[("name", 1)])


def get_genre(repo: BaseRepository[Genre], id: ObjectId) -> Genre:
    return get_or_404(repo, id, NOT_FOUND)


def create_genre(repo: BaseRepository[Genre], body: GenreWrite) -> Genre:
    return repo.create(Genre(name=body.name))


def update_genre(repo: BaseRepository[Genre], id: ObjectId, body: GenreWrite) -> Genre:
    return found_or_404(repo.update(id, {"name": body.name}), id, NOT_FOUND)


def delete_genre(repo: BaseRepository[Genre], id: ObjectId) -> Genre:
    return found_or_404(repo.delete(id), id, NOT_FOUND)
