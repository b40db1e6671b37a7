"""Tests for issuing and verifying auth tokens."""

from datetime import timedelta

import pytest
from jose import jwt

from rental_api.application.services.token_service import (
    TokenVerificationError,
    issue_token,
    verify_token,
)
from rental_api.config import get_settings
from rental_api.domain.schemas.auth import TokenIdentity


def test_issued_token_verifies_to_same_identity():
    identity = TokenIdentity(id="5c0f66b979af55031b34728a", is_admin=True)

    decoded = verify_token(issue_token(identity))

    assert decoded.id == identity.id
    assert decoded.is_admin is True


def test_payload_uses_document_field_names():
    token = issue_token(TokenIdentity(id="5c0f66b979af55031b34728a"))
    claims = jwt.get_unverified_claims(token)

    assert claims["_id"] == "5c0f66b979af55031b34728a"
    assert claims["isAdmin"] is False
    assert "exp" in claims


@pytest.mark.parametrize("token", ["a", "", "not.a.jwt", "a.b.c"])
def test_garbage_is_rejected(token):
    with pytest.raises(TokenVerificationError):
        verify_token(token)


def test_tampered_payload_is_rejected():
    token = issue_token(TokenIdentity(id="5c0f66b979af55031b34728a"))
    header, _, signature = token.split(".")
    forged = jwt.encode(
        {"_id": "5c0f66b979af55031b34728a", "isAdmin": True},
        "some-other-secret",
        algorithm="HS256",
    )
    forged_payload = forged.split(".")[1]

    with pytest.raises(TokenVerificationError):
        verify_token(f"{header}.{forged_payload}.{signature}")


def test_token_signed_with_other_secret_is_rejected():
    settings = get_settings()
    token = jwt.encode({"_id": "x", "isAdmin": True}, "wrong", algorithm=settings.JWT_ALGORITHM)

    with pytest.raises(TokenVerificationError):
        verify_token(token)


def test_expired_token_fails_like_a_malformed_one():
    token = issue_token(TokenIdentity(id="5c0f66b979af55031b34728a"), expires_delta=timedelta(seconds=-5))

    with pytest.raises(TokenVerificationError) as exc_info:
        verify_token(token)

    assert str(exc_info.value) == "Malformed token"


def test_token_without_identity_is_rejected():
    settings = get_settings()
    token = jwt.encode({"isAdmin": True}, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    with pytest.raises(TokenVerificationError):
        verify_token(token)
