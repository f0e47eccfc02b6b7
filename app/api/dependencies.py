# app/api/dependencies.py
from functools import lru_cache

from app.repos.kv_store import KeyValueStore, InMemoryKeyValueStore, RedisKeyValueStore
from app.utils.settings import KV_BACKEND
from app.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_kv_store() -> KeyValueStore:
    if KV_BACKEND == "memory":
        logger.info("Using in-memory key/value store")
        return InMemoryKeyValueStore()
    return RedisKeyValueStore()
