"""In-memory filesystem provider: dict-backed, for unit tests and local runs."""

from __future__ import annotations

from collections.abc import Mapping

from bucketfs.core.content_types import content_type_for
from bucketfs.core.exceptions import FileNotFoundInStorage
from bucketfs.core.paths import join_root, resolve_path
from bucketfs.core.types import ByteContent, Expiry, expiry_seconds
from bucketfs.models.file import File, FileSource
from bucketfs.providers.streams import iter_chunks


class MemoryFilesystem:
    """Dict-backed IFilesystemProvider. Scoped views share one store."""

    def __init__(self, root: str = "", files: dict[str, bytes] | None = None) -> None:
        self.root = root
        self._files: dict[str, bytes] = {} if files is None else files
        self._content_types: dict[str, str | None] = {}

    @property
    def files(self) -> dict[str, bytes]:
        return self._files

    def content_type_of(self, key: str) -> str | None:
        return self._content_types.get(key)

    async def get(self, path: str) -> File:
        key = resolve_path(self.root, path)
        if key not in self._files:
            raise FileNotFoundInStorage(key)
        data = self._files[key]
        return File(name=key, source=FileSource.FILESYSTEM, path=key, content=data, size=len(data))

    async def create(self, path: str, content: ByteContent) -> File:
        key = resolve_path(self.root, path)
        data = b"".join([chunk async for chunk in iter_chunks(content)])
        self._files[key] = data
        self._content_types[key] = content_type_for(key)
        return File(name=key, source=FileSource.FILESYSTEM, path=key)

    async def exists(self, path: str) -> bool:
        return resolve_path(self.root, path) in self._files

    async def delete(self, path: str) -> None:
        key = resolve_path(self.root, path)
        self._files.pop(key, None)
        self._content_types.pop(key, None)

    def url(self, path: str) -> str:
        return f"memory://{resolve_path(self.root, path)}"

    async def temporary_url(
        self, path: str, expires_in: Expiry, headers: Mapping[str, str] | None = None
    ) -> str:
        return f"{self.url(path)}?expires={expiry_seconds(expires_in)}"

    def directory(self, path: str) -> MemoryFilesystem:
        view = MemoryFilesystem(root=join_root(self.root, path), files=self._files)
        view._content_types = self._content_types
        return view
