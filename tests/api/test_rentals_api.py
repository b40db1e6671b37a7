"""/api/rentals — checkout and lookups."""

import pytest
from bson import ObjectId


def checkout(client, token, customer_id, movie_id):
    return client.post(
        "/api/rentals",
        json={"customerId": str(customer_id), "movieId": str(movie_id)},
        headers={"x-auth-token": token},
    )


def test_requires_login(client, customer, movie):
    res = client.post("/api/rentals", json={"customerId": str(customer.id), "movieId": str(movie.id)})

    assert res.status_code == 401


def test_creates_rental_and_takes_stock(client, user_token, customer, movie, movies, rentals):
    res = checkout(client, user_token, customer.id, movie.id)

    assert res.status_code == 200
    body = res.json()
    assert body["customer"] == {"_id": str(customer.id), "name": "12345", "phone": "12345", "isGold": False}
    assert body["movie"] == {"_id": str(movie.id), "title": "12345", "dailyRentalRate": 2}
    assert body["dateReturned"] is None
    assert body["rentalFee"] is None
    assert rentals.get_by_id(ObjectId(body["_id"])) is not None
    assert movies.get_by_id(movie.id).number_in_stock == movie.number_in_stock - 1


def test_unknown_customer_is_400(client, user_token, movie):
    res = checkout(client, user_token, ObjectId(), movie.id)

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid customer."


def test_unknown_movie_is_400(client, user_token, customer):
    res = checkout(client, user_token, customer.id, ObjectId())

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid movie."


def test_out_of_stock_is_400(client, user_token, customer, movie, movies, rentals):
    movies.update(movie.id, {"numberInStock": 0})

    res = checkout(client, user_token, customer.id, movie.id)

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Movie not in stock."
    assert movies.get_by_id(movie.id).number_in_stock == 0
    assert rentals.list() == []


def test_snapshot_survives_customer_edit(client, user_token, customer, customers, movie):
    rental_id = checkout(client, user_token, customer.id, movie.id).json()["_id"]
    customers.update(customer.id, {"name": "Renamed customer"})

    res = client.get(f"/api/rentals/{rental_id}", headers={"x-auth-token": user_token})

    assert res.json()["customer"]["name"] == "12345"


def test_checkout_then_return_round_trip(client, user_token, customer, movie, movies):
    checkout(client, user_token, customer.id, movie.id)
    res = client.post(
        "/api/returns",
        json={"customerId": str(customer.id), "movieId": str(movie.id)},
        headers={"x-auth-token": user_token},
    )

    assert res.status_code == 200
    assert res.json()["rentalFee"] == 0
    assert movies.get_by_id(movie.id).number_in_stock == movie.number_in_stock


def test_list_is_newest_first(client, user_token, make_rental):
    older = make_rental(days_out=5)
    newer = make_rental(days_out=1)

    res = client.get("/api/rentals", headers={"x-auth-token": user_token})

    assert [r["_id"] for r in res.json()] == [str(newer.id), str(older.id)]


@pytest.mark.parametrize("rental_id", ["1", str(ObjectId())])
def test_unknown_rental_is_404(client, user_token, rental_id):
    assert client.get(f"/api/rentals/{rental_id}", headers={"x-auth-token": user_token}).status_code == 404
