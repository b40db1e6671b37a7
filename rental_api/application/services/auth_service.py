"""Auth service — password hashing, login and registration."""

from typing import Optional

import structlog
from passlib.context import CryptContext
from pymongo.errors import DuplicateKeyError

from rental_api.config import Settings
from rental_api.core.exceptions import InvalidInputException
from rental_api.domain.models.user import User
from rental_api.domain.repositories.user_repository import UserRepository
from rental_api.domain.schemas.auth import TokenIdentity

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def identity_of(user: User) -> TokenIdentity:
    return TokenIdentity(id=str(user.id), is_admin=user.is_admin)


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[User]:
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password):
        return None
    return user


def get_user_by_email(repo: UserRepository, email: str) -> Optional[User]:
    return repo.get_by_email(email)


def create_user(repo: UserRepository, name: str, email: str, password: str, is_admin: bool = False) -> User:
    user = User(
        name=name,
        email=email,
        password=hash_password(password),
        is_admin=is_admin,
    )
    return repo.create(user)


def register_user(repo: UserRepository, name: str, email: str, password: str) -> User:
    if get_user_by_email(repo, email):
        raise InvalidInputException("User already registered.")
    try:
        user = create_user(repo, name=name, email=email, password=password)
    except DuplicateKeyError:
        # Lost a race with a concurrent registration; the unique index caught it
        raise InvalidInputException("User already registered.")
    logger.info("User registered", user_id=str(user.id))
    return user


def ensure_default_admin(repo: UserRepository, settings: Settings) -> Optional[User]:
    """Create the configured admin account if it does not exist yet."""
    if not (settings.DEFAULT_ADMIN_EMAIL and settings.DEFAULT_ADMIN_PASSWORD):
        return None
    admin = get_user_by_email(repo, settings.DEFAULT_ADMIN_EMAIL)
    if not admin:
        admin = create_user(
            repo,
            name=settings.DEFAULT_ADMIN_NAME,
            email=settings.DEFAULT_ADMIN_EMAIL,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            is_admin=True,
        )
        logger.info("Default admin user created", email=settings.DEFAULT_ADMIN_EMAIL)
    return admin
