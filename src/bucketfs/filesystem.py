"""Filesystem facade over a pluggable provider."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from bucketfs.core.config import AppSettings
from bucketfs.core.exceptions import FileContentMissingError
from bucketfs.core.log import configure_logging
from bucketfs.core.paths import resolve_path
from bucketfs.core.protocols import IFilesystemProvider
from bucketfs.core.types import ByteContent, Expiry
from bucketfs.models.file import File
from bucketfs.providers.local_backend import LocalFilesystem
from bucketfs.providers.memory_backend import MemoryFilesystem
from bucketfs.providers.s3_backend import S3Filesystem


class Filesystem:
    """Uniform file API; all work is delegated to ``provider``."""

    def __init__(self, provider: IFilesystemProvider) -> None:
        self.provider = provider

    # ---- factories ----

    @classmethod
    def s3(
        cls,
        key: str | None,
        secret: str | None,
        bucket: str,
        root: str = "",
        region: str = "us-east-1",
        endpoint: str | None = None,
    ) -> Filesystem:
        """Create a filesystem backed by S3 or S3-compatible storage."""
        return cls(S3Filesystem.from_credentials(
            key=key, secret=secret, bucket=bucket, root=root, region=region, endpoint=endpoint,
        ))

    @classmethod
    def s3_client(cls, client: Any, bucket: str, root: str = "") -> Filesystem:
        """Create a filesystem on an existing boto3 S3 client."""
        return cls(S3Filesystem(client=client, bucket=bucket, root=root))

    @classmethod
    def memory(cls, root: str = "") -> Filesystem:
        return cls(MemoryFilesystem(root=root))

    @classmethod
    def local(cls, base_dir: str | Path, root: str = "") -> Filesystem:
        return cls(LocalFilesystem(base_dir, root=root))

    # ---- delegated operations ----

    @property
    def root(self) -> str:
        return self.provider.root

    async def get(self, path: str) -> File:
        return await self.provider.get(path)

    async def create(self, path: str, content: ByteContent) -> File:
        return await self.provider.create(path, content)

    async def exists(self, path: str) -> bool:
        return await self.provider.exists(path)

    async def delete(self, path: str) -> None:
        await self.provider.delete(path)

    def url(self, path: str) -> str:
        return self.provider.url(path)

    async def temporary_url(
        self, path: str, expires_in: Expiry, headers: Mapping[str, str] | None = None
    ) -> str:
        return await self.provider.temporary_url(path, expires_in, headers=headers)

    def directory(self, path: str) -> Filesystem:
        return Filesystem(self.provider.directory(path))

    async def put(self, file: File, name: str | None = None, directory: str | None = None) -> File:
        """Store ``file``'s content as ``name`` (default: its own name) in ``directory``."""
        if file.content is None:
            raise FileContentMissingError(f"File {file.name!r} has no content to store")
        path = name or file.name
        if directory:
            path = resolve_path(directory, path)
        return await self.create(path, file.content)


def create_filesystem(settings: AppSettings | None = None) -> Filesystem:
    """Create a Filesystem for the driver selected in application settings."""
    if settings is None:
        settings = AppSettings()

    configure_logging(settings.log_level)

    if settings.driver == "memory":
        return Filesystem.memory()
    if settings.driver == "local":
        return Filesystem.local(settings.local.base_dir, root=settings.local.root)

    s3 = settings.s3
    return Filesystem(S3Filesystem.from_credentials(
        key=s3.access_key,
        secret=s3.secret_key,
        bucket=s3.bucket,
        root=s3.root,
        region=s3.region,
        endpoint=s3.endpoint_url,
        addressing_style=s3.addressing_style,
    ))
