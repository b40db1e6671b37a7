"""User API routes — register, me."""

from fastapi import APIRouter, Depends, Response

from rental_api.application.services.auth_service import identity_of, register_user
from rental_api.application.services.common import get_or_404
from rental_api.application.services.token_service import issue_token
from rental_api.domain.repositories.user_repository import UserRepository
from rental_api.domain.schemas.auth import TokenIdentity, UserCreate, UserRead
from rental_api.interfaces.api.deps import AUTH_HEADER, get_current_user, object_id_or_404
from rental_api.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=UserRead)
def register(body: UserCreate, response: Response, repo: UserRepository = Depends(get_user_repository)):
    user = register_user(repo, name=body.name, email=body.email, password=body.password)
    response.headers[AUTH_HEADER] = issue_token(identity_of(user))
    return user.to_document()


@router.get("/me", response_model=UserRead)
def get_me(
    user: TokenIdentity = Depends(get_current_user),
    repo: UserRepository = Depends(get_user_repository),
):
    return get_or_404(repo, object_id_or_404(user.id), "User not found.").to_document()
