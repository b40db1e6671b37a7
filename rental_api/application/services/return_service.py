"""Return service — closes an open rental.

A return stamps ``dateReturned``, computes ``rentalFee`` from the whole
days the movie was out and puts the copy back in stock. The two writes are
separate single-document updates: the stamp is conditional on the rental
still being open, so of two racing returns only one ever reaches the
stock increment. Inside one process, returns for the same customer and
movie are additionally serialized by a keyed lock.
"""

from datetime import datetime
from typing import Optional

import structlog
from bson import ObjectId
from pymongo.errors import PyMongoError

from rental_api.core.exceptions import AlreadyProcessedException, EntityNotFoundException
from rental_api.core.locks import KeyedLock
from rental_api.domain.models.rental import Rental
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.repositories.rental_repository import RentalRepository

logger = structlog.get_logger(__name__)

_return_locks = KeyedLock()


def _find_rental_to_return(rentals: RentalRepository, customer_id: ObjectId, movie_id: ObjectId) -> Rental:
    rental = rentals.find_open(customer_id, movie_id)
    if rental is not None:
        return rental

    # Nothing open: tell "never rented" apart from "already brought back"
    latest = rentals.find_latest(customer_id, movie_id)
    if latest is None:
        raise EntityNotFoundException(
            "Rental not found.",
            details={"customerId": str(customer_id), "movieId": str(movie_id)},
        )
    return latest


def process_return(
    rentals: RentalRepository,
    movies: MovieRepository,
    customer_id: ObjectId,
    movie_id: ObjectId,
    now: Optional[datetime] = None,
) -> Rental:
    with _return_locks.hold((customer_id, movie_id)):
        rental = _find_rental_to_return(rentals, customer_id, movie_id)
        if rental.date_returned is not None:
            raise AlreadyProcessedException(details={"rentalId": str(rental.id)})

        stamped = rental.returned(now)
        updated = rentals.mark_returned(rental.id, stamped.date_returned, stamped.rental_fee)
        if updated is None:
            # Another return closed it between the lookup and the write
            raise AlreadyProcessedException(details={"rentalId": str(rental.id)})

        try:
            restocked = movies.increment_stock(rental.movie.id)
        except PyMongoError:
            logger.error(
                "Stock increment failed for returned rental",
                rental_id=str(rental.id),
                movie_id=str(rental.movie.id),
            )
            raise
        if restocked is None:
            logger.warning("Returned movie no longer exists", movie_id=str(rental.movie.id))

    logger.info(
        "Rental returned",
        rental_id=str(updated.id),
        rental_fee=updated.rental_fee,
        days_out=(updated.date_returned - updated.date_out).days,
    )
    return updated
