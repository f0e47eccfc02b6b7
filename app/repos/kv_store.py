# app/repos/kv_store.py
"""
Magazyn klucz/wartosc dla rekordow "po stronie klienta":

    reviews_<product_id>  -> lista recenzji (najnowsze najpierw)
    shipping_details      -> ostatni zapisany formularz wysylki

Wstrzykiwany do serwisow (Depends), nigdy nie jest globalnym stanem.
Wartosci to dowolne obiekty JSON.
"""
import json
import threading
from typing import Any, Protocol

import redis
from redis.exceptions import RedisError

from app.domain.errors import StorageError
from app.utils.settings import REDIS_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Any | None:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class InMemoryKeyValueStore:
    """Trzyma kopie JSON, zeby wywolujacy nie mogl zmienic stanu przez referencje."""

    def __init__(self):
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        raw = json.dumps(value)
        with self._lock:
            self._data[key] = raw


class RedisKeyValueStore:
    def __init__(self, url: str | None = None, client: redis.Redis | None = None, prefix: str = "storefront:"):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Any | None:
        try:
            raw = self.redis.get(self._key(key))
        except RedisError as e:
            logger.error(f"Redis GET {key} failed: {e}")
            raise StorageError(f"Cannot read {key}") from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Corrupted value under {key}") from e

    def set(self, key: str, value: Any) -> None:
        try:
            self.redis.set(self._key(key), json.dumps(value))
        except RedisError as e:
            logger.error(f"Redis SET {key} failed: {e}")
            raise StorageError(f"Cannot write {key}") from e
