"""Customer service — CRUD over the customers collection."""

from typing import List

from bson import ObjectId

from rental_api.application.services.common import found_or_404, get_or_404
from rental_api.domain.models.customer import Customer
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.schemas.customer import CustomerWrite

NOT_FOUND = "The customer with the given ID was not found."


def list_customers(repo: BaseRepository[Customer]) -> List[Customer]:
    return repo.list(limit=0, sort=[("name", 1)])


def get_customer(repo: BaseRepository[Customer], id: ObjectId) -> Customer:
    return get_or_404(repo, id, NOT_FOUND)


def create_customer(repo: BaseRepository[Customer], body: CustomerWrite) -> Customer:
    return repo.create(Customer(**body.model_dump()))


def update_customer(repo: BaseRepository[Customer], id: ObjectId, body: CustomerWrite) -> Customer:
    changes = body.model_dump(by_alias=True)
    return found_or_404(repo.update(id, changes), id, NOT_FOUND)


def delete_customer(repo: BaseRepository[Customer], id: ObjectId) -> Customer:
    return found_or_404(repo.delete(id), id, NOT_FOUND)
