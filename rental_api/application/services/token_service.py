"""Token service — issues and verifies signed identity tokens.

Tokens are HS256 JWTs carrying ``{"_id", "isAdmin"}``. Verification never
says why a token was rejected: tampered, expired and unparsable tokens
all raise the same error.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import ValidationError

from rental_api.config import get_settings
from rental_api.domain.schemas.auth import TokenIdentity


class TokenVerificationError(Exception):
    """The token could not be verified."""


def issue_token(identity: TokenIdentity, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    claims = identity.model_dump(by_alias=True)
    claims.update({"sub": identity.id, "exp": expire})
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> TokenIdentity:
    settings = get_settings()
    try:
        # jose compares signatures with hmac.compare_digest
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return TokenIdentity.model_validate(payload)
    except (JWTError, ValidationError) as exc:
        raise TokenVerificationError("Malformed token") from exc
