"""Shared types: key material, the key store interface, errors and configuration."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import timedelta
from typing import Sequence


@dataclass(frozen=True)
class KeyMaterial:
    """One secret key together with its identifier and creation time."""

    kid: str
    secret: str
    created_at_unix: int


class KeyStoreError(Exception):
    """Raised when keys cannot be read from or written to a store."""


class InvalidFormatError(KeyStoreError):
    """Raised when stored key data is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Format error: {detail}")
        self.detail = detail


class KeyStore(abc.ABC):
    """Persistent storage for a list of keys."""

    @abc.abstractmethod
    def read_keys(self) -> list[KeyMaterial]:
        """Return every stored key in stored order."""

    @abc.abstractmethod
    def write_keys(self, keys: Sequence[KeyMaterial]) -> None:
        """Replace the stored keys with ``keys``."""


@dataclass
class KeyManagerConfig:
    """Settings that govern key generation, rotation and reloading."""

    size: int
    count: int
    ttl_secs: int
    reload_interval: timedelta