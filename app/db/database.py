"""Data access layer for loading zoo data from JSON files.

Each resource lives in its own file under ``settings.DATA_DIR`` as an object
with one named root array, e.g. ``{"animals": [...]}``. Parsed lists are kept
in memory with an absolute and a sliding expiry, and can be invalidated per
file when the data on disk is replaced.
"""

import json
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.config import settings
from app.models.animal import Animal
from app.models.quiz import Quiz
from app.models.route import Route
from app.models.zone import Zone

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

ANIMALS_FILE = "animals.json"
ZONES_FILE = "zones.json"
ROUTES_FILE = "routes.json"
QUIZZES_FILE = "quizzes.json"

CACHE_KEY_PREFIX = "JsonData_"


class DataFileError(Exception):
    """A data file exists but could not be read or parsed."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(f"{file_name}: {reason}")
        self.file_name = file_name
        self.reason = reason


@dataclass
class _CacheEntry:
    value: tuple[Any, ...]
    created_at: float
    last_access: float


class JsonDataStore:
    """Read-through cache over the JSON data directory."""

    def __init__(
        self,
        data_path: Path | str,
        absolute_ttl: float = 300,
        sliding_ttl: float = 120,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.data_path = Path(data_path)
        self.absolute_ttl = absolute_ttl
        self.sliding_ttl = sliding_ttl
        self._clock = clock
        self._cache: dict[str, _CacheEntry] = {}
        self._cache_keys: set[str] = set()
        self._cache_keys_lock = threading.Lock()

    @staticmethod
    def _cache_key(file_name: str, root_property: str, model: type[BaseModel]) -> str:
        return f"{CACHE_KEY_PREFIX}{file_name}_{root_property}_{model.__name__}"

    def _get_cached(self, key: str) -> tuple[Any, ...] | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        now = self._clock()
        if now - entry.created_at >= self.absolute_ttl or now - entry.last_access >= self.sliding_ttl:
            self._cache.pop(key, None)
            with self._cache_keys_lock:
                self._cache_keys.discard(key)
            return None
        entry.last_access = now
        return entry.value

    def _set_cached(self, key: str, value: tuple[Any, ...]) -> None:
        now = self._clock()
        self._cache[key] = _CacheEntry(value=value, created_at=now, last_access=now)
        with self._cache_keys_lock:
            self._cache_keys.add(key)

    def load(self, file_name: str, root_property: str, model: type[T]) -> list[T]:
        """Return the entities stored under ``root_property`` in ``file_name``.

        A missing file or a missing root property yields an empty list and is
        not cached. Malformed JSON or an entity failing validation raises
        ``DataFileError``.
        """
        cache_key = self._cache_key(file_name, root_property, model)
        cached = self._get_cached(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s (%s)", file_name, model.__name__)
            return list(cached)

        file_path = self.data_path / file_name
        if not file_path.is_file():
            logger.warning("Data file not found: %s", file_path)
            return []

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in data file %s: %s", file_name, e)
            raise DataFileError(file_name, f"invalid JSON ({e})") from e
        except OSError as e:
            logger.error("Failed to read data file %s: %s", file_name, e)
            raise DataFileError(file_name, f"unreadable ({e})") from e

        if not isinstance(document, dict) or root_property not in document:
            logger.warning("Property '%s' not found in %s", root_property, file_name)
            return []

        raw_items = document[root_property]
        if not isinstance(raw_items, list):
            logger.error("Property '%s' in %s is not an array", root_property, file_name)
            raise DataFileError(file_name, f"'{root_property}' is not an array")

        try:
            items = tuple(model.model_validate(item) for item in raw_items)
        except ValidationError as e:
            logger.error("Invalid %s record in %s: %s", model.__name__, file_name, e)
            raise DataFileError(file_name, f"invalid {model.__name__} record") from e

        self._set_cached(cache_key, items)
        logger.info("Loaded %d %s records from %s", len(items), model.__name__, file_name)
        return list(items)

    def clear_cache(self, file_name: str) -> int:
        """Drop every cached entry read from ``file_name``. Returns how many were dropped."""
        prefix = f"{CACHE_KEY_PREFIX}{file_name}_"
        with self._cache_keys_lock:
            keys = [k for k in self._cache_keys if k.startswith(prefix)]
            for key in keys:
                self._cache.pop(key, None)
                self._cache_keys.discard(key)
        logger.info("Cleared %d cache entries for %s", len(keys), file_name)
        return len(keys)

    def clear_all_cache(self) -> int:
        """Drop every cached entry. Returns how many were dropped."""
        with self._cache_keys_lock:
            count = len(self._cache_keys)
            for key in self._cache_keys:
                self._cache.pop(key, None)
            self._cache_keys.clear()
        logger.info("Cleared all data cache entries (%d)", count)
        return count


@lru_cache(maxsize=1)
def get_data_store() -> JsonDataStore:
    """Return the process-wide data store configured from settings."""
    return JsonDataStore(
        settings.data_path,
        absolute_ttl=settings.CACHE_ABSOLUTE_TTL,
        sliding_ttl=settings.CACHE_SLIDING_TTL,
    )


def load_animals() -> list[Animal]:
    return get_data_store().load(ANIMALS_FILE, "animals", Animal)


def load_zones() -> list[Zone]:
    return get_data_store().load(ZONES_FILE, "zones", Zone)


def load_routes() -> list[Route]:
    return get_data_store().load(ROUTES_FILE, "routes", Route)


def load_quizzes() -> list[Quiz]:
    return get_data_store().load(QUIZZES_FILE, "quizzes", Quiz)
