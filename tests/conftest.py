"""tests/conftest.py – shared fixtures for all tests."""
import os

# Must be set before tastyfork.deps is imported: local URI (no SRV lookup) + fixed secret.
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")

import mongomock
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from tastyfork.core.settings import Settings
from tastyfork.core.tokens import TokenService
from tastyfork.db.store import MarketStore
from tastyfork.handlers.auth_handler import AuthHandler
from tastyfork.handlers.food_handler import FoodHandler
from tastyfork.handlers.order_handler import OrderHandler

SECRET = "test-secret"


def make_food(**kw) -> dict:
    defaults = dict(
        food_name="Margherita Pizza", image="https://img.test/pizza.jpg", category="Italian",
        food_quantity=20, price=12.5, country="Italy", description="Tomato, mozzarella, basil",
        seller={"name": "Mario", "email": "mario@test.com"},
    )
    defaults.update(kw)
    return defaults


@pytest.fixture
def mongo_db():
    return mongomock.MongoClient()["tastyForkDB"]


@pytest.fixture
def store(mongo_db) -> MarketStore:
    return MarketStore(mongo_db)


@pytest.fixture
def sample_foods(mongo_db) -> list:
    """Three foods with distinct purchaseCounts, inserted out of order."""
    docs = [
        make_food(food_name="Pepperoni PIZZA", purchaseCount=3),
        make_food(food_name="Pad Thai", country="Thailand", purchaseCount=10),
        make_food(food_name="pizza bianca", purchaseCount=7),
    ]
    ids = mongo_db["foods"].insert_many(docs).inserted_ids
    return [str(i) for i in ids]


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(SECRET)


@pytest.fixture
def settings() -> Settings:
    return Settings(token_secret=SECRET)


@pytest.fixture
def client(store, tokens, settings):
    """Patch the deps singletons so every route sees the in-memory store."""
    with (
        patch("tastyfork.deps._store", store),
        patch("tastyfork.deps._tokens", tokens),
        patch("tastyfork.deps._auth", AuthHandler(tokens, settings)),
        patch("tastyfork.deps._foods", FoodHandler(store)),
        patch("tastyfork.deps._orders", OrderHandler(store)),
    ):
        from tastyfork.main import app
        yield TestClient(app)


@pytest.fixture
def auth_cookie(tokens):
    """Cookie header carrying a valid token for the given email."""
    def _make(email: str = "buyer@test.com") -> dict:
        return {"Cookie": f"token={tokens.issue({'email': email})}"}
    return _make
