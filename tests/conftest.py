"""
Shared fixtures.

Every test gets its own mongomock database; API tests drive the real
application through FastAPI's TestClient with that database injected.
"""

import io
import logging
import os
from datetime import datetime, timedelta, timezone

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

import mongomock  # noqa: E402
import pytest  # noqa: E402
import structlog  # noqa: E402
from bson import ObjectId  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from rental_api.application.services.token_service import issue_token  # noqa: E402
from rental_api.core.logging import configure_logging  # noqa: E402
from rental_api.domain.models.customer import Customer  # noqa: E402
from rental_api.domain.models.genre import Genre  # noqa: E402
from rental_api.domain.models.movie import GenreSnapshot, Movie  # noqa: E402
from rental_api.domain.models.rental import CustomerSnapshot, MovieSnapshot, Rental  # noqa: E402
from rental_api.domain.schemas.auth import TokenIdentity  # noqa: E402
from rental_api.infrastructure.repositories.base_repository import MongoRepository  # noqa: E402
from rental_api.infrastructure.repositories.movie_repository import MongoMovieRepository  # noqa: E402
from rental_api.infrastructure.repositories.rental_repository import MongoRentalRepository  # noqa: E402
from rental_api.main import create_app  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)
        elif "api" in item.path.parts:
            item.add_marker(pytest.mark.api)


# ============================================================================
# Database and application
# ============================================================================


@pytest.fixture
def db():
    client = mongomock.MongoClient()
    database = client["vidly_tests"]
    yield database
    client.drop_database("vidly_tests")


@pytest.fixture
def app(db):
    return create_app(database=db)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# Tokens
# ============================================================================


def _make_token(is_admin: bool = False, user_id: str = None) -> str:
    return issue_token(TokenIdentity(id=user_id or str(ObjectId()), is_admin=is_admin))


@pytest.fixture
def make_token():
    return _make_token


@pytest.fixture
def user_token() -> str:
    return _make_token()


@pytest.fixture
def admin_token() -> str:
    return _make_token(is_admin=True)


# ============================================================================
# Repositories and documents
# ============================================================================


@pytest.fixture
def genres(db):
    return MongoRepository(db, Genre)


@pytest.fixture
def customers(db):
    return MongoRepository(db, Customer)


@pytest.fixture
def movies(db):
    return MongoMovieRepository(db, Movie)


@pytest.fixture
def rentals(db):
    return MongoRentalRepository(db, Rental)


@pytest.fixture
def genre(genres) -> Genre:
    return genres.create(Genre(name="Comedy"))


@pytest.fixture
def customer(customers) -> Customer:
    return customers.create(Customer(name="12345", phone="12345"))


@pytest.fixture
def movie(movies, genre) -> Movie:
    return movies.create(
        Movie(
            title="12345",
            genre=GenreSnapshot(id=genre.id, name=genre.name),
            number_in_stock=10,
            daily_rental_rate=2,
        )
    )


@pytest.fixture
def make_rental(rentals, customer, movie):
    """Insert a rental of `movie` by `customer`, checked out `days_out` days ago."""

    def _make(days_out: int = 0, returned: bool = False) -> Rental:
        date_out = datetime.now(timezone.utc) - timedelta(days=days_out)
        rental = Rental(
            customer=CustomerSnapshot(id=customer.id, name=customer.name, phone=customer.phone),
            movie=MovieSnapshot(id=movie.id, title=movie.title, daily_rental_rate=movie.daily_rental_rate),
            date_out=date_out,
            date_returned=datetime.now(timezone.utc) if returned else None,
        )
        return rentals.create(rental)

    return _make


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_output():
    """Everything the app logs during the test, rendered by its own formatter."""
    configure_logging()
    root_logger = logging.getLogger()
    formatter = next(
        h.formatter for h in root_logger.handlers
        if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    )
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    yield stream
    root_logger.removeHandler(handler)
