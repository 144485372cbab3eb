"""Secret generation and rotation helpers."""

from __future__ import annotations

import secrets
import string
from datetime import timedelta

CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "!@#$%^&*(-_=+)"


def generate_secret(length: int) -> str:
    """Return a random secret of ``length`` characters from a CSPRNG."""
    return "".join(secrets.choice(CHARSET) for _ in range(length))


def recommended_rotation_interval(ttl_secs: int, count: int) -> timedelta:
    """Return how often keys should rotate for the given TTL and key count."""
    return timedelta(seconds=(ttl_secs * 2) // count)