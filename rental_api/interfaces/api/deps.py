"""FastAPI dependencies — token auth and admin check.

``get_current_user`` is the auth step for protected routes: it reads the
``x-auth-token`` header, verifies it and attaches the identity to
``request.state``. ``require_admin`` runs after it on admin-only routes.
Neither touches the database. Both are async so the ``user_id`` bound into
structlog context vars lives in the request task, not a threadpool copy.
"""

from typing import Optional

import structlog
from bson import ObjectId
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from rental_api.application.services.token_service import TokenVerificationError, verify_token
from rental_api.core.exceptions import (
    BadTokenException,
    EntityNotFoundException,
    ForbiddenException,
    UnauthorizedException,
)
from rental_api.domain.schemas.auth import TokenIdentity

AUTH_HEADER = "x-auth-token"

token_header = APIKeyHeader(name=AUTH_HEADER, auto_error=False)


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(token_header),
) -> TokenIdentity:
    """Verify the auth token and expose the caller's identity."""
    if not token:
        raise UnauthorizedException()

    try:
        identity = verify_token(token)
    except TokenVerificationError:
        raise BadTokenException()

    request.state.user = identity
    structlog.contextvars.bind_contextvars(user_id=identity.id)
    return identity


async def require_admin(user: Optional[TokenIdentity] = Depends(get_current_user)) -> TokenIdentity:
    """Require admin role."""
    if user is None or not user.is_admin:
        raise ForbiddenException()
    return user


def object_id_or_404(value: str) -> ObjectId:
    """Path ids that are not ObjectIds cannot name a document."""
    if not ObjectId.is_valid(value):
        raise EntityNotFoundException("Invalid ID.", details={"id": value})
    return ObjectId(value)
