"""Rental API routes — list, detail, checkout."""

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends

from rental_api.application.services.rental_service import create_rental, get_rental, list_rentals
from rental_api.domain.models.customer import Customer
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.repositories.rental_repository import RentalRepository
from rental_api.domain.schemas.auth import TokenIdentity
from rental_api.domain.schemas.rental import RentalRead, RentalRequest
from rental_api.interfaces.api.deps import get_current_user, object_id_or_404
from rental_api.interfaces.deps import (
    get_customer_repository,
    get_movie_repository,
    get_rental_repository,
)

router = APIRouter(prefix="/api/rentals", tags=["Rentals"])


@router.get("", response_model=List[RentalRead])
def rentals_index(
    repo: RentalRepository = Depends(get_rental_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return [rental.to_document() for rental in list_rentals(repo)]


@router.get("/{rental_id}", response_model=RentalRead)
def rental_detail(
    rental_id: str,
    repo: RentalRepository = Depends(get_rental_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return get_rental(repo, object_id_or_404(rental_id)).to_document()


@router.post("", response_model=RentalRead)
def rental_create(
    body: RentalRequest,
    rentals: RentalRepository = Depends(get_rental_repository),
    movies: MovieRepository = Depends(get_movie_repository),
    customers: BaseRepository[Customer] = Depends(get_customer_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    rental = create_rental(
        rentals,
        movies,
        customers,
        customer_id=ObjectId(body.customer_id),
        movie_id=ObjectId(body.movie_id),
    )
    return rental.to_document()
