"""User document — stored in the 'users' collection."""

from typing import ClassVar

from rental_api.domain.models.base import DocumentModel


class User(DocumentModel):
    collection_name: ClassVar[str] = "users"

    name: str
    email: str
    password: str  # bcrypt hash, never returned to clients
    is_admin: bool = False

    def __repr__(self):
        return f"<User {self.email}>"
