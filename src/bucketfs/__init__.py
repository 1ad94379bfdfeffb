"""Async filesystem abstraction backed by S3-compatible object storage."""

from __future__ import annotations

from bucketfs.core.exceptions import (
    BucketFSError,
    FileNotFoundInStorage,
    StorageError,
    URLConstructionError,
)
from bucketfs.core.protocols import IFilesystemProvider
from bucketfs.filesystem import Filesystem, create_filesystem
from bucketfs.models.file import File, FileSource

__all__ = [
    "BucketFSError",
    "File",
    "FileNotFoundInStorage",
    "FileSource",
    "Filesystem",
    "IFilesystemProvider",
    "StorageError",
    "URLConstructionError",
    "create_filesystem",
]
