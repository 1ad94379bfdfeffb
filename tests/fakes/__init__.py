"""Shared test doubles: re-export the memory provider."""

from __future__ import annotations

from bucketfs.providers.memory_backend import MemoryFilesystem

__all__ = ["MemoryFilesystem"]
