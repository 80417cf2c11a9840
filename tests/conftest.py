import pytest
from fastapi.testclient import TestClient

import main
import storefront
from client_cart import reset_storage
from database import db

SHIPPING = {
    "fullName": "Eren Yeager",
    "address": "104 Wall Rose",
    "city": "Shiganshina",
    "postalCode": "44600",
    "country": "Paradis",
}


@pytest.fixture(autouse=True)
def fresh_state():
    db.reset()
    reset_storage()
    yield
    db.reset()
    reset_storage()


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def shop():
    return TestClient(storefront.app)


@pytest.fixture
def register(client):
    """Register a user and return their bearer auth headers."""
    def _register(email="mikasa@animestore.io", name="Mikasa", password="scarf-123"):
        resp = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 201, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}
    return _register


@pytest.fixture
def auth(register):
    return register()


@pytest.fixture
def shipping():
    return dict(SHIPPING)
