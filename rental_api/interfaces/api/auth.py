"""Auth API route — exchange credentials for a token."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from rental_api.application.services.auth_service import authenticate_user, identity_of
from rental_api.application.services.token_service import issue_token
from rental_api.core.exceptions import InvalidInputException
from rental_api.domain.repositories.user_repository import UserRepository
from rental_api.domain.schemas.auth import LoginRequest
from rental_api.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("", response_class=PlainTextResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.email, body.password)
    if not user:
        raise InvalidInputException("Invalid email or password.")

    return PlainTextResponse(issue_token(identity_of(user)))
