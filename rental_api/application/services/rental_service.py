"""Rental service — checkout and lookups."""

from typing import List

import structlog
from bson import ObjectId

from rental_api.application.services.common import get_or_404
from rental_api.core.exceptions import BusinessRuleViolationException, InvalidInputException
from rental_api.domain.models.customer import Customer
from rental_api.domain.models.rental import CustomerSnapshot, MovieSnapshot, Rental
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.repositories.rental_repository import RentalRepository

logger = structlog.get_logger(__name__)

NOT_FOUND = "The rental with the given ID was not found."


def list_rentals(repo: RentalRepository) -> List[Rental]:
    return repo.list(limit=0, sort=[("dateOut", -1)])


def get_rental(repo: RentalRepository, id: ObjectId) -> Rental:
    return get_or_404(repo, id, NOT_FOUND)


def create_rental(
    rentals: RentalRepository,
    movies: MovieRepository,
    customers: BaseRepository[Customer],
    customer_id: ObjectId,
    movie_id: ObjectId,
) -> Rental:
    customer = customers.get_by_id(customer_id)
    if customer is None:
        raise InvalidInputException("Invalid customer.", details={"customerId": str(customer_id)})

    if movies.get_by_id(movie_id) is None:
        raise InvalidInputException("Invalid movie.", details={"movieId": str(movie_id)})

    movie = movies.take_from_stock(movie_id)
    if movie is None:
        raise BusinessRuleViolationException("Movie not in stock.", details={"movieId": str(movie_id)})

    rental = Rental(
        customer=CustomerSnapshot(
            id=customer.id,
            name=customer.name,
            phone=customer.phone,
            is_gold=customer.is_gold,
        ),
        movie=MovieSnapshot(
            id=movie.id,
            title=movie.title,
            daily_rental_rate=movie.daily_rental_rate,
        ),
    )
    rentals.create(rental)
    logger.info("Rental created", rental_id=str(rental.id), movie_id=str(movie.id))
    return rental
