"""Customer document — stored in the 'customers' collection."""

from typing import ClassVar

from rental_api.domain.models.base import DocumentModel


class Customer(DocumentModel):
    collection_name: ClassVar[str] = "customers"

    name: str
    phone: str
    is_gold: bool = False

    def __repr__(self):
        return f"<Customer {self.name}>"
