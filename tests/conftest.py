"""Shared fixtures: rate limiter reset and a temporary data directory."""

from pathlib import Path

import pytest

from app.api.v1.endpoints.animals import limiter as animals_limiter
from app.api.v1.endpoints.quizzes import limiter as quizzes_limiter
from app.api.v1.endpoints.routes import limiter as routes_limiter
from app.api.v1.endpoints.search import limiter as search_limiter
from app.api.v1.endpoints.zones import limiter as zones_limiter
from app.config import settings
from app.db.database import get_data_store
from zoo_data import ANIMALS, QUIZZES, ROUTES, ZONES, write_json


@pytest.fixture(autouse=True)
def _reset_rate_limiters() -> None:
    """Reset SlowAPI in-memory counters to avoid cross-test leakage."""
    for limiter in (animals_limiter, zones_limiter, routes_limiter, quizzes_limiter, search_limiter):
        storage = getattr(limiter, "_storage", None)
        if storage is not None and hasattr(storage, "reset"):
            storage.reset()


@pytest.fixture(autouse=True)
def _fresh_data_store():
    """Give every test its own data store so cached data never leaks between tests."""
    get_data_store.cache_clear()
    yield
    get_data_store.cache_clear()


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application at a temporary directory holding the fixture zoo."""
    write_json(tmp_path / "animals.json", {"animals": ANIMALS})
    write_json(tmp_path / "zones.json", {"zones": ZONES})
    write_json(tmp_path / "routes.json", {"routes": ROUTES})
    write_json(tmp_path / "quizzes.json", {"quizzes": QUIZZES})
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path))
    get_data_store.cache_clear()
    return tmp_path
