"""Genre document — stored in the 'genres' collection."""

from typing import ClassVar

from rental_api.domain.models.base import DocumentModel


class Genre(DocumentModel):
    collection_name: ClassVar[str] = "genres"

    name: str

    def __repr__(self):
        return f"<Genre {self.name}>"
