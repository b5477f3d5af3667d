# rocketcart/repos/snapshot_repo.py
from typing import Dict, Protocol

import redis
from sqlalchemy.orm import sessionmaker

from rocketcart.data.database import create_session_factory
from rocketcart.data.models.snapshot import CartSnapshotModel
from rocketcart.utils.retry import redis_retry
from rocketcart.utils.settings import CART_STORE_BACKEND, REDIS_URL
from rocketcart.utils.logging import get_logger

logger = get_logger(__name__)


class SnapshotStore(Protocol):
    """Magazyn klucz -> blob dla snapshotu koszyka."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, blob: str) -> None: ...


class MemorySnapshotRepo:
    def __init__(self, initial: Dict[str, str] | None = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, blob: str) -> None:
        self.data[key] = blob


class RedisSnapshotRepo:
    """
    -snapshot jako zwykly string pod kluczem
    -brak TTL, koszyk zyje do nastepnego zapisu
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def get(self, key: str) -> str | None:
        logger.info(f"Redis GET {key}")
        return self.redis.get(key)

    @redis_retry()
    def set(self, key: str, blob: str) -> None:
        logger.info(f"Redis SET {key} ({len(blob)} bytes)")
        self.redis.set(key, blob)


class SqlSnapshotRepo:
    """Snapshot w tabeli cart_snapshots, jeden wiersz na klucz."""

    def __init__(self, session_factory: sessionmaker | None = None):
        self.session_factory = session_factory or create_session_factory()

    def get(self, key: str) -> str | None:
        with self.session_factory() as db:
            row = db.get(CartSnapshotModel, key)
            return row.blob if row else None

    def set(self, key: str, blob: str) -> None:
        with self.session_factory() as db:
            try:
                # upsert po kluczu
                db.merge(CartSnapshotModel(key=key, blob=blob))
                db.commit()
            except Exception:
                db.rollback()
                raise


def build_snapshot_store(backend: str | None = None) -> SnapshotStore:
    backend = (backend or CART_STORE_BACKEND).lower()
    logger.info(f"Snapshot store backend: {backend}")

    if backend == "memory":
        return MemorySnapshotRepo()
    if backend == "redis":
        return RedisSnapshotRepo()
    if backend == "sql":
        return SqlSnapshotRepo()

    raise ValueError(f"Nieznany backend snapshotu: {backend}")
