"""
API Dependencies — repositories bound to the app's database handle.
"""

from fastapi import Depends
from pymongo.database import Database

from rental_api.infrastructure.database import get_db
from rental_api.domain.models.customer import Customer
from rental_api.domain.models.genre import Genre
from rental_api.domain.models.movie import Movie
from rental_api.domain.models.rental import Rental
from rental_api.domain.models.user import User
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.repositories.rental_repository import RentalRepository
from rental_api.domain.repositories.user_repository import UserRepository
from rental_api.infrastructure.repositories.base_repository import MongoRepository
from rental_api.infrastructure.repositories.movie_repository import MongoMovieRepository
from rental_api.infrastructure.repositories.rental_repository import MongoRentalRepository
from rental_api.infrastructure.repositories.user_repository import MongoUserRepository


def get_genre_repository(db: Database = Depends(get_db)) -> BaseRepository[Genre]:
    return MongoRepository(db, Genre)


def get_customer_repository(db: Database = Depends(get_db)) -> BaseRepository[Customer]:
    return MongoRepository(db, Customer)


def get_movie_repository(db: Database = Depends(get_db)) -> MovieRepository:
    return MongoMovieRepository(db, Movie)


def get_rental_repository(db: Database = Depends(get_db)) -> RentalRepository:
    return MongoRentalRepository(db, Rental)


def get_user_repository(db: Database = Depends(get_db)) -> UserRepository:
    return MongoUserRepository(db, User)
