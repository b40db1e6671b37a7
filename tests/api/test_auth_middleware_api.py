"""Token and role checks on protected routes."""

import pytest
from bson import ObjectId

from rental_api.domain.models.genre import Genre


def post_genre(client, headers):
    return client.post("/api/genres", json={"name": "genre3"}, headers=headers)


def test_missing_token_is_401(client):
    res = post_genre(client, {})

    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UnauthorizedException"


def test_empty_token_is_401(client):
    assert post_genre(client, {"x-auth-token": ""}).status_code == 401


@pytest.mark.parametrize("token", ["a", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30.bad"])
def test_malformed_token_is_400(client, token):
    res = post_genre(client, {"x-auth-token": token})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BadTokenException"


def test_valid_token_passes(client, user_token):
    assert post_genre(client, {"x-auth-token": user_token}).status_code == 200


def test_auth_runs_before_body_validation(client):
    res = client.post("/api/genres", json={"name": "1"})

    assert res.status_code == 401


def test_non_admin_on_admin_route_is_403(client, user_token, genres):
    genre = genres.create(Genre(name="genre1"))

    res = client.delete(f"/api/genres/{genre.id}", headers={"x-auth-token": user_token})

    assert res.status_code == 403
    assert genres.get_by_id(genre.id) is not None


def test_admin_route_still_needs_a_token(client):
    assert client.delete(f"/api/movies/{ObjectId()}").status_code == 401
