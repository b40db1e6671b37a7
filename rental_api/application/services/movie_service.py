"""Movie service — CRUD over the movies collection.

The movie keeps a copy of its genre's id and name, taken when the movie
is created or updated.
"""

from typing import List

from bson import ObjectId

from rental_api.application.services.common import found_or_404, get_or_404
from rental_api.core.exceptions import InvalidInputException
from rental_api.domain.models.genre import Genre
from rental_api.domain.models.movie import GenreSnapshot, Movie
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.schemas.movie import MovieWrite

NOT_FOUND = "The movie with the given ID was not found."


def _genre_snapshot(genres: BaseRepository[Genre], genre_id: str) -> GenreSnapshot:
    genre = genres.get_by_id(ObjectId(genre_id))
    if genre is None:
        raise InvalidInputException("Invalid genre.", details={"genreId": genre_id})
    return GenreSnapshot(id=genre.id, name=genre.name)


def list_movies(repo: MovieRepository) -> List[Movie]:
    return repo.list(limit=0, sort=[("title", 1)])


def get_movie(repo: MovieRepository, id: ObjectId) -> Movie:
    return get_or_404(repo, id, NOT_FOUND)


def create_movie(repo: MovieRepository, genres: BaseRepository[Genre], body: MovieWrite) -> Movie:
    movie = Movie(
        title=body.title,
        genre=_genre_snapshot(genres, body.genre_id),
        number_in_stock=body.number_in_stock,
        daily_rental_rate=body.daily_rental_rate,
    )
    return repo.create(movie)


def update_movie(repo: MovieRepository, genres: BaseRepository[Genre], id: ObjectId, body: MovieWrite) -> Movie:
    changes = {
        "title": body.title,
        "genre": _genre_snapshot(genres, body.genre_id).model_dump(by_alias=True),
        "numberInStock": body.number_in_stock,
        "dailyRentalRate": body.daily_rental_rate,
    }
    return found_or_404(repo.update(id, changes), id, NOT_FOUND)


def delete_movie(repo: MovieRepository, id: ObjectId) -> Movie:
    return found_or_404(repo.delete(id), id, NOT_FOUND)
