"""Type aliases used across bucketfs."""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable
from datetime import timedelta
from typing import Union

ByteStream = Union[Iterable[bytes], AsyncIterable[bytes]]
ByteContent = Union[bytes, ByteStream]
Expiry = Union[int, timedelta]


def expiry_seconds(expires_in: Expiry) -> int:
    """Normalize an expiry to a positive number of seconds."""
    if isinstance(expires_in, timedelta):
        seconds = int(expires_in.total_seconds())
    else:
        seconds = int(expires_in)
    if seconds <= 0:
        raise ValueError(f"expires_in must be positive, got {expires_in!r}")
    return seconds
