"""Genre API routes — public reads, authenticated writes, admin deletes."""

from typing import List

from fastapi import APIRouter, Depends

from rental_api.application.services.genre_service import (
    create_genre,
    delete_genre,
    get_genre,
    list_genres,
    update_genre,
)
from rental_api.domain.models.genre import Genre
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.schemas.auth import TokenIdentity
from rental_api.domain.schemas.genre import GenreRead, GenreWrite
from rental_api.interfaces.api.deps import get_current_user, object_id_or_404, require_admin
from rental_api.interfaces.deps import get_genre_repository

router = APIRouter(prefix="/api/genres", tags=["Genres"])


@router.get("", response_model=List[GenreRead])
def genres_index(repo: BaseRepository[Genre] = Depends(get_genre_repository)):
    return [genre.to_document() for genre in list_genres(repo)]


@router.get("/{genre_id}", response_model=GenreRead)
def genre_detail(genre_id: str, repo: BaseRepository[Genre] = Depends(get_genre_repository)):
    return get_genre(repo, object_id_or_404(genre_id)).to_document()


@router.post("", response_model=GenreRead)
def genre_create(
    body: GenreWrite,
    repo: BaseRepository[Genre] = Depends(get_genre_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return create_genre(repo, body).to_document()


@router.put("/{genre_id}", response_model=GenreRead)
def genre_update(
    genre_id: str,
    body: GenreWrite,
    repo: BaseRepository[Genre] = Depends(get_genre_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return update_genre(repo, object_id_or_404(genre_id), body).to_document()


@router.delete("/{genre_id}", response_model=GenreRead)
def genre_delete(
    genre_id: str,
    repo: BaseRepository[Genre] = Depends(get_genre_repository),
    user: TokenIdentity = Depends(require_admin),
):
    return delete_genre(repo, object_id_or_404(genre_id)).to_document()
