"""Application-level behavior: service routes, request ids, 500 envelope."""

from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from rental_api.interfaces.deps import get_genre_repository


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_root_describes_service(client):
    assert client.get("/").json()["status"] == "running"


def test_responses_carry_request_id(client):
    res = client.get("/health", headers={"X-Request-ID": "3f2c1b7e8a9d4c6e9f0a1b2c3d4e5f60"})

    assert res.headers["X-Request-ID"] == "3f2c1b7e8a9d4c6e9f0a1b2c3d4e5f60"


def test_unexpected_error_is_a_generic_500(app):
    class BrokenRepository:
        def list(self, *args, **kwargs):
            raise PyMongoError("server selection timeout")

    app.dependency_overrides[get_genre_repository] = lambda: BrokenRepository()

    with TestClient(app, raise_server_exceptions=False) as client:
        res = client.get("/api/genres")

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "InternalServerError"
    assert "server selection" not in error["message"]


def test_indexes_are_created_on_startup(client, db):
    assert "email_1" in db["users"].index_information()


def test_unexpected_error_is_logged_once(app, log_output):
    class BrokenRepository:
        def list(self, *args, **kwargs):
            raise PyMongoError("server selection timeout")

    app.dependency_overrides[get_genre_repository] = lambda: BrokenRepository()

    with TestClient(app, raise_server_exceptions=False) as client:
        assert client.get("/api/genres").status_code == 500

    output = log_output.getvalue()
    assert output.count("Unhandled exception") == 1
    assert "Request failed" not in output
