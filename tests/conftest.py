"""Shared pytest fixtures for storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.core.security import hash_password
from storefront.db.storage import Storage
from storefront.main import create_app

PASSWORD = "secret123"


def make_user(storage: Storage, username: str, email: str, is_admin: bool = False):
    return storage.create_user({
        "username": username,
        "email": email,
        "password": hash_password(PASSWORD),
        "is_admin": is_admin,
    })


def make_product(storage: Storage, name: str, price: float, sale_price=None, **extra):
    data = {
        "name": name,
        "description": extra.pop("description", f"{name} description"),
        "price": price,
        "sale_price": sale_price,
        "category": extra.pop("category", "womens"),
        "sub_category": extra.pop("sub_category", "dresses"),
        "image_urls": ["https://img.example.com/1.jpg"],
    }
    data.update(extra)
    return storage.create_product(data)


def login(app, email: str, password: str = PASSWORD) -> TestClient:
    client = TestClient(app)
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def settings():
    """Settings for an isolated, unseeded app."""
    return Settings(SEED_SAMPLE_DATA=False, SECRET_KEY="test-secret", LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    """A fresh application with its own empty store."""
    return create_app(settings)


@pytest.fixture
def storage(app):
    return app.state.storage


@pytest.fixture
def client(app):
    """Anonymous client."""
    return TestClient(app)


@pytest.fixture
def user(storage):
    return make_user(storage, "shopper", "shopper@example.com")


@pytest.fixture
def other_user(storage):
    return make_user(storage, "someone", "someone@example.com")


@pytest.fixture
def admin(storage):
    return make_user(storage, "boss", "boss@example.com", is_admin=True)


@pytest.fixture
def user_client(app, user):
    return login(app, user.email)


@pytest.fixture
def other_client(app, other_user):
    return login(app, other_user.email)


@pytest.fixture
def admin_client(app, admin):
    return login(app, admin.email)


@pytest.fixture
def dress(storage):
    """Product A: regular price only."""
    return make_product(storage, "Casual Summer Dress", 49.99)


@pytest.fixture
def jacket(storage):
    """Product B: on sale."""
    return make_product(
        storage, "Classic Denim Jacket", 89.99, sale_price=69.99,
        category="mens", sub_category="shirts", is_featured=True,
        description="A timeless denim jacket.",
    )


@pytest.fixture
def scarf(storage):
    return make_product(
        storage, "Cashmere Scarf", 39.99,
        category="accessories", sub_category="scarves", is_new=True,
        description="Luxurious scarf for colder months.",
    )
