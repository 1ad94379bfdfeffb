"""File descriptor returned by filesystem operations."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel

from bucketfs.core.content_types import content_type_for_extension, extension_of


class FileSource(StrEnum):
    FILESYSTEM = "filesystem"  # resident in a storage backend
    RAW = "raw"  # built in memory, not yet stored


class File(BaseModel):
    """A named blob, optionally carrying its content."""

    model_config = {"frozen": True}

    name: str
    source: FileSource = FileSource.RAW
    path: Optional[str] = None  # backend key when source is FILESYSTEM
    content: Optional[bytes] = None
    size: Optional[int] = None

    @classmethod
    def raw(cls, name: str, content: bytes) -> File:
        return cls(name=name, source=FileSource.RAW, content=content, size=len(content))

    @property
    def extension(self) -> str | None:
        base = self.name.rsplit("/", 1)[-1]
        return extension_of(base)

    @property
    def content_type(self) -> str | None:
        extension = self.extension
        if extension is None:
            return None
        return content_type_for_extension(extension)
