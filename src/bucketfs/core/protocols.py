"""Protocol interfaces for bucketfs providers.

Backends conform structurally, no inheritance required, and can be checked
with isinstance().
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bucketfs.core.types import ByteContent, Expiry

if TYPE_CHECKING:
    from bucketfs.models.file import File


# ---------------------------------------------------------------------------
# Filesystem Provider
# ---------------------------------------------------------------------------

@runtime_checkable
class IFilesystemProvider(Protocol):
    """Storage backend behind a Filesystem (S3, local disk, memory)."""

    root: str

    async def get(self, path: str) -> File: ...

    async def create(self, path: str, content: ByteContent) -> File: ...

    async def exists(self, path: str) -> bool: ...

    async def delete(self, path: str) -> None: ...

    def url(self, path: str) -> str: ...

    async def temporary_url(
        self, path: str, expires_in: Expiry, headers: Mapping[str, str] | None = None
    ) -> str: ...

    def directory(self, path: str) -> IFilesystemProvider: ...
