"""Movie API routes."""

from typing import List

from fastapi import APIRouter, Depends

from rental_api.application.services.movie_service import (
    create_movie,
    delete_movie,
    get_movie,
    list_movies,
    update_movie,
)
from rental_api.domain.models.genre import Genre
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.repositories.movie_repository import MovieRepository
from rental_api.domain.schemas.auth import TokenIdentity
from rental_api.domain.schemas.movie import MovieRead, MovieWrite
from rental_api.interfaces.api.deps import get_current_user, object_id_or_404, require_admin
from rental_api.interfaces.deps import get_genre_repository, get_movie_repository

router = APIRouter(prefix="/api/movies", tags=["Movies"])


@router.get("", response_model=List[MovieRead])
def movies_index(repo: MovieRepository = Depends(get_movie_repository)):
    return [movie.to_document() for movie in list_movies(repo)]


@router.get("/{movie_id}", response_model=MovieRead)
def movie_detail(movie_id: str, repo: MovieRepository = Depends(get_movie_repository)):
    return get_movie(repo, object_id_or_404(movie_id)).to_document()


@router.post("", response_model=MovieRead)
def movie_create(
    body: MovieWrite,
    repo: MovieRepository = Depends(get_movie_repository),
    genres: BaseRepository[Genre] = Depends(get_genre_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return create_movie(repo, genres, body).to_document()


@router.put("/{movie_id}", response_model=MovieRead)
def movie_update(
    movie_id: str,
    body: MovieWrite,
    repo: MovieRepository = Depends(get_movie_repository),
    genres: BaseRepository[Genre] = Depends(get_genre_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return update_movie(repo, genres, object_id_or_404(movie_id), body).to_document()


@router.delete("/{movie_id}", response_model=MovieRead)
def movie_delete(
    movie_id: str,
    repo: MovieRepository = Depends(get_movie_repository),
    user: TokenIdentity = Depends(require_admin),
):
    return delete_movie(repo, object_id_or_404(movie_id)).to_document()
