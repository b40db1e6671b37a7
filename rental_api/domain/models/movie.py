"""Movie document — stored in the 'movies' collection."""

from typing import ClassVar

from rental_api.domain.models.base import DocumentModel, Snapshot


class GenreSnapshot(Snapshot):
    name: str


class Movie(DocumentModel):
    collection_name: ClassVar[str] = "movies"

    title: str
    genre: GenreSnapshot
    number_in_stock: int = 0
    daily_rental_rate: float = 0

    def __repr__(self):
        return f"<Movie {self.title}>"
