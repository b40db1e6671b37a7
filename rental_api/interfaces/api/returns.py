"""Returns API route — bring a rented movie back."""

from bson import ObjectId
from fastapi import APIRouter, Depends

from rental_api.application.services.return_service import process_return
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.repositories.rental_repository import RentalRepository
from rental_api.domain.schemas.auth import TokenIdentity
from rental_api.domain.schemas.rental import RentalRead, RentalRequest
from rental_api.interfaces.api.deps import get_current_user
from rental_api.interfaces.deps import get_movie_repository, get_rental_repository

router = APIRouter(prefix="/api/returns", tags=["Returns"])


@router.post("", response_model=RentalRead)
def return_rental(
    body: RentalRequest,
    rentals: RentalRepository = Depends(get_rental_repository),
    movies: MovieRepository = Depends(get_movie_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    """Close the open rental for the customer/movie pair and restock the movie."""
    rental = process_return(
        rentals,
        movies,
        customer_id=ObjectId(body.customer_id),
        movie_id=ObjectId(body.movie_id),
    )
    return rental.to_document()
