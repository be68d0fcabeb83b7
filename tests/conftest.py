"""
Shared test fixtures - test client, fresh price cache, sample requests.
"""

import pytest
from fastapi.testclient import TestClient

from desk_configurator.main import app
from desk_configurator.price_cache import price_cache


@pytest.fixture(autouse=True)
def clear_price_cache():
    """Every test starts with an empty price cache."""
    price_cache.clear()
    yield
    price_cache.clear()


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def reference_request():
    """The 120x60x75 wood/matte/premium desk used across the pricing docs."""
    return {
        "width_cm": 120,
        "depth_cm": 60,
        "height_cm": 75,
        "material": "wood",
        "finish": "matte",
        "tier": "premium",
        "quantity": 2,
    }
