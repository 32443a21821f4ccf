import pytest
from fastapi.testclient import TestClient

from app.catalog.store import BookStore, get_store
from app.main import app


NEW_BOOK = {"title": "X", "author": "Y", "category": "Z", "rating": 3}


@pytest.fixture
def store():
    return BookStore()


@pytest.fixture
def api_client(store):
    """TestClient bound to a fresh seeded store for each test."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_endpoint(api_client):
    response = api_client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_books(api_client):
    response = api_client.get("/api/books")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 10
    assert data[0] == {
        "id": 1,
        "title": "A Brief History of Time",
        "author": "Stephen Hawking",
        "category": "Science",
        "rating": 5,
    }


def test_list_books_by_category(api_client):
    response = api_client.get("/api/books", params={"category": "science"})
    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [1, 8]


def test_list_books_unknown_category_is_empty(api_client):
    response = api_client.get("/api/books", params={"category": "Cooking"})
    assert response.status_code == 200
    assert response.json() == []


def test_get_book_by_title(api_client):
    response = api_client.get("/api/books/title/the art of war")
    assert response.status_code == 200
    assert response.json()["id"] == 10


def test_get_book_by_title_missing_returns_null(api_client):
    response = api_client.get("/api/books/title/Unknown")
    assert response.status_code == 200
    assert response.json() is None


def test_get_book_by_id(api_client):
    response = api_client.get("/api/books/id/7")
    assert response.status_code == 200
    assert response.json()["title"] == "To Kill a Mockingbird"


def test_get_book_by_id_missing_returns_404(api_client):
    response = api_client.get("/api/books/id/11")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["message"] == "Book not found - 11"
    assert isinstance(body["timestamp"], int)


@pytest.mark.parametrize("book_id", ["0", "-3", "abc"])
def test_get_book_by_invalid_id_returns_400(api_client, book_id):
    response = api_client.get(f"/api/books/id/{book_id}")
    assert response.status_code == 400
    assert response.json()["status"] == 400


def test_create_book(api_client, store):
    response = api_client.post("/api/books", json=NEW_BOOK)
    assert response.status_code == 201
    assert response.content == b""

    created = api_client.get("/api/books/id/11").json()
    assert created == {"id": 11, **NEW_BOOK}
    assert len(api_client.get("/api/books").json()) == 11


@pytest.mark.parametrize(
    "payload",
    [
        {"author": "Y", "category": "Z", "rating": 3},
        {"title": "", "author": "Y", "category": "Z", "rating": 3},
        {"title": "X", "author": "Y", "category": "Z"},
        {"title": "X", "author": "Y", "category": "Z", "rating": "high"},
    ],
)
def test_create_book_invalid_payload_returns_400(api_client, store, payload):
    response = api_client.post("/api/books", json=payload)
    assert response.status_code == 400
    assert len(store) == 10


def test_update_book(api_client):
    response = api_client.put("/api/books/2", json=NEW_BOOK)
    assert response.status_code == 200
    assert response.json() == {"id": 2, **NEW_BOOK}
    assert api_client.get("/api/books/id/2").json() == {"id": 2, **NEW_BOOK}


def test_update_missing_book_returns_404(api_client, store):
    before = store.list_books()
    response = api_client.put("/api/books/99", json=NEW_BOOK)
    assert response.status_code == 404
    assert response.json()["message"] == "Book not found - 99"
    assert store.list_books() == before


def test_update_invalid_payload_returns_400(api_client):
    response = api_client.put("/api/books/2", json={"title": "X"})
    assert response.status_code == 400


def test_delete_book(api_client):
    response = api_client.delete("/api/books/3")
    assert response.status_code == 204
    assert response.content == b""
    assert api_client.get("/api/books/id/3").status_code == 404


def test_delete_missing_book_returns_404(api_client, store):
    response = api_client.delete("/api/books/42")
    assert response.status_code == 404
    assert len(store) == 10


def test_cors_does_not_echo_origin_with_credentials(api_client):
    response = api_client.get("/api/books", headers={"Origin": "http://evil.test"})
    assert response.status_code == 200
    assert response.headers.get("access-control-allow-credentials") is None
    assert response.headers.get("access-control-allow-origin") != "http://evil.test"
