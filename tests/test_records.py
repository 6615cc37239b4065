"""Tests for scheme/method/event listings and user lookup."""

import pytest

from soilsense.app.di import get_method_store, get_scheme_store, get_user_directory
from soilsense.app.stores.memory import InMemoryDocumentStore, InMemoryUserDirectory

PM_KISAN = {
    "id": "pm-kisan",
    "name": "PM-KISAN",
    "tagline": "Income support for farmers",
    "focusAreas": ["income"],
}


@pytest.fixture
def stores(app):
    schemes = InMemoryDocumentStore(key_field="id")
    methods = InMemoryDocumentStore(key_field="id", seed=[
        {"id": "m1", "title": "Drip irrigation"},
        {"id": "m2", "title": "Mulching"},
    ])
    users = InMemoryUserDirectory([
        {"id": "u1", "email": "asha@example.com", "name": "Asha", "password": "hashed"},
    ])
    app.dependency_overrides[get_scheme_store] = lambda: schemes
    app.dependency_overrides[get_method_store] = lambda: methods
    app.dependency_overrides[get_user_directory] = lambda: users
    return schemes, methods, users


class TestSchemes:
    def test_create_then_list(self, client, stores):
        response = client.post("/api/schemes", json=PM_KISAN)
        assert response.status_code == 201
        saved = response.json()
        assert saved["id"] == "pm-kisan"
        assert saved["imageUrl"] == ""

        listed = client.get("/api/schemes").json()
        assert [s["id"] for s in listed] == ["pm-kisan"]

    def test_duplicate_id_is_400(self, client, stores):
        client.post("/api/schemes", json=PM_KISAN)
        response = client.post("/api/schemes", json=PM_KISAN)
        assert response.status_code == 400
        assert response.json()["message"] == "Error creating scheme"

    def test_missing_name_is_400(self, client, stores):
        response = client.post("/api/schemes", json={"id": "x"})
        assert response.status_code == 400
        schemes, _, _ = stores
        assert len(schemes) == 0

    def test_store_failure_is_500(self, app, client):
        class BrokenStore:
            async def find_all(self):
                raise ConnectionError("db down")

        app.dependency_overrides[get_scheme_store] = lambda: BrokenStore()
        response = client.get("/api/schemes")
        assert response.status_code == 500
        assert response.json() == {"message": "Server error while fetching schemes"}


def test_methods(client, stores):
    titles = [m["title"] for m in client.get("/api/methods").json()]
    assert titles == ["Drip irrigation", "Mulching"]


def test_events(client):
    events = client.get("/api/events").json()
    assert [e["id"] for e in events] == ["e1", "e2"]


class TestUsers:
    def test_lookup_by_email_hides_password(self, client, stores):
        response = client.get("/api/users/Asha@Example.com")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["name"] == "Asha"
        assert "password" not in data["user"]

    def test_lookup_by_id(self, client, stores):
        response = client.get("/api/users/by-id/u1")
        assert response.status_code == 200
        assert "password" not in response.json()["user"]

    def test_unknown_user_is_404(self, client, stores):
        response = client.get("/api/users/nobody@example.com")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}


def test_document_store_returns_copies():
    import asyncio

    store = InMemoryDocumentStore(seed=[{"id": "a", "tags": ["x"]}])
    docs = asyncio.run(store.find_all())
    docs[0]["tags"].append("y")
    assert asyncio.run(store.find_all())[0]["tags"] == ["x"]


def test_user_directory_normalizes_lookup_email():
    import asyncio

    users = InMemoryUserDirectory([{"id": "u1", "email": " Asha@Example.com", "name": "Asha"}])
    found = asyncio.run(users.find_by_email("  ASHA@example.COM "))
    assert found is not None and found["id"] == "u1"
    assert asyncio.run(users.find_by_email("")) is None
