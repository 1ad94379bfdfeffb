"""Filesystem providers behind the IFilesystemProvider protocol."""

from __future__ import annotations

from bucketfs.providers.local_backend import LocalFilesystem
from bucketfs.providers.memory_backend import MemoryFilesystem
from bucketfs.providers.s3_backend import S3Filesystem

__all__ = ["LocalFilesystem", "MemoryFilesystem", "S3Filesystem"]
