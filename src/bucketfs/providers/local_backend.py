"""Local disk filesystem provider implementing IFilesystemProvider."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

from bucketfs.core.exceptions import FileNotFoundInStorage, UnsupportedOperationError
from bucketfs.core.paths import join_root, resolve_path
from bucketfs.core.types import ByteContent, Expiry
from bucketfs.models.file import File, FileSource
from bucketfs.providers.streams import iter_chunks

logger = logging.getLogger(__name__)


class LocalFilesystem:
    """Files stored under ``base_dir``; keys are resolved relative to it."""

    def __init__(self, base_dir: str | Path, root: str = "") -> None:
        self._base_dir = Path(base_dir)
        self.root = root

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _file_path(self, key: str) -> Path:
        return self._base_dir / key.lstrip("/")

    async def get(self, path: str) -> File:
        key = resolve_path(self.root, path)
        target = self._file_path(key)
        try:
            data = await asyncio.to_thread(target.read_bytes)
        except FileNotFoundError as exc:
            raise FileNotFoundInStorage(key) from exc
        return File(name=key, source=FileSource.FILESYSTEM, path=key, content=data, size=len(data))

    async def create(self, path: str, content: ByteContent) -> File:
        key = resolve_path(self.root, path)
        target = self._file_path(key)
        await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
        handle = await asyncio.to_thread(target.open, "wb")
        try:
            async for chunk in iter_chunks(content):
                await asyncio.to_thread(handle.write, chunk)
        finally:
            await asyncio.to_thread(handle.close)
        logger.info("Stored %s", target)
        return File(name=key, source=FileSource.FILESYSTEM, path=key)

    async def exists(self, path: str) -> bool:
        target = self._file_path(resolve_path(self.root, path))
        return await asyncio.to_thread(target.is_file)

    async def delete(self, path: str) -> None:
        target = self._file_path(resolve_path(self.root, path))
        await asyncio.to_thread(target.unlink, missing_ok=True)
        logger.info("Deleted %s", target)

    def url(self, path: str) -> str:
        return self._file_path(resolve_path(self.root, path)).resolve().as_uri()

    async def temporary_url(
        self, path: str, expires_in: Expiry, headers: Mapping[str, str] | None = None
    ) -> str:
        raise UnsupportedOperationError("Local disk storage cannot sign temporary URLs")

    def directory(self, path: str) -> LocalFilesystem:
        return LocalFilesystem(self._base_dir, root=join_root(self.root, path))
