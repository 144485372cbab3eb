"""Key manager: keeps an in-memory view of a key store and rotates keys."""

from __future__ import annotations

import threading
import time
from datetime import timedelta

from keyden.commons import KeyManagerConfig, KeyMaterial, KeyStore
from keyden.utils import generate_secret


class KeyManager:
    """Holds the keys of a store, ordered by insertion, and manages their rotation.

    The most recently inserted key is the current one.
    """

    def __init__(
        self,
        store: KeyStore,
        size: int = 128,
        count: int = 1,
        ttl_secs: int = 86400,
        reload_interval: timedelta = timedelta(seconds=30),
    ) -> None:
        self._store = store
        self._lock = threading.RLock()
        self.config = KeyManagerConfig(
            size=size,
            count=count,
            ttl_secs=ttl_secs,
            reload_interval=reload_interval,
        )
        self._keys: dict[str, KeyMaterial] = {k.kid: k for k in store.read_keys()}
        self._last_reload_at = time.monotonic()

    @property
    def store(self) -> KeyStore:
        """The store the keys are loaded from and saved to."""
        return self._store

    def get_key(self, kid: str) -> KeyMaterial | None:
        """Return the key with identifier ``kid``, or None."""
        with self._lock:
            return self._keys.get(kid)

    def current_key(self) -> KeyMaterial | None:
        """Return the most recently inserted key, or None when there are none."""
        with self._lock:
            return next(reversed(self._keys.values()), None)

    def _reload_due(self) -> bool:
        elapsed = time.monotonic() - self._last_reload_at
        return elapsed >= self.config.reload_interval.total_seconds()

    def can_reload(self) -> bool:
        """Tell whether the reload interval has passed since the last reload."""
        with self._lock:
            return self._reload_due()

    def reload(self) -> None:
        """Re-read the keys from the store if the reload interval has passed."""
        with self._lock:
            if not self._reload_due():
                return
        keys = self._store.read_keys()
        with self._lock:
            self._keys = {k.kid: k for k in keys}
            self._last_reload_at = time.monotonic()

    def save_keys(self) -> None:
        """Write all keys held in memory to the store."""
        with self._lock:
            keys = list(self._keys.values())
            self._store.write_keys(keys)

    def generate_key(self, kid: str) -> KeyMaterial:
        """Create a new key under ``kid`` and hold it in memory.

        The key is not written to the store until :meth:`save_keys` is called.
        """
        key = KeyMaterial(
            kid=kid,
            secret=generate_secret(self.config.size),
            created_at_unix=int(time.time()),
        )
        with self._lock:
            self._keys[kid] = key
        return key

    def rotate_keys(self) -> bool:
        """Add and save a new key if fewer than ``count`` keys exist.

        Returns True when a key was added.
        """
        self.reload()
        with self._lock:
            if len(self._keys) >= self.config.count:
                return False
            self.generate_key(f"key-{time.time_ns()}")
            self.save_keys()
            return True

    def list_keys(self) -> list[KeyMaterial]:
        """Return every key in insertion order."""
        with self._lock:
            return list(self._keys.values())

    @staticmethod
    def generate_temp_key(size: int) -> KeyMaterial:
        """Return an ad-hoc key that is not stored anywhere."""
        created_at_unix = int(time.time())
        return KeyMaterial(
            kid=f"temp-{created_at_unix}",
            secret=generate_secret(size),
            created_at_unix=created_at_unix,
        )