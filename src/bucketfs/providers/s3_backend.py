"""S3 filesystem provider implementing IFilesystemProvider."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any
from urllib.parse import quote, urlsplit

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from bucketfs.core.content_types import content_type_for
from bucketfs.core.exceptions import URLConstructionError
from bucketfs.core.paths import join_root, resolve_path
from bucketfs.core.types import ByteContent, Expiry, expiry_seconds
from bucketfs.models.file import File, FileSource
from bucketfs.providers.streams import is_stream, stream_reader

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})

# Headers to sign into the presigned URL being generated on this context.
_signed_headers: ContextVar[Mapping[str, str] | None] = ContextVar(
    "bucketfs_signed_headers", default=None
)


def _add_signed_headers(request: Any, **kwargs: Any) -> None:
    headers = _signed_headers.get()
    if headers:
        for name, value in headers.items():
            request.headers[name] = value


def is_not_found(exc: ClientError) -> bool:
    error = exc.response.get("Error", {})
    status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return str(error.get("Code", "")) in NOT_FOUND_CODES or status == 404


class S3Filesystem:
    """IFilesystemProvider backed by S3 or an S3-compatible service.

    The boto3 client is shared, never owned: scoped views reuse it and nothing
    here closes it. Blocking client calls run in worker threads.
    """

    def __init__(self, client: Any, bucket: str, root: str = "") -> None:
        self._client = client
        self._bucket = bucket
        self.root = root
        # unique_id keeps one handler per client however many views exist.
        client.meta.events.register(
            "before-sign.s3.GetObject",
            _add_signed_headers,
            unique_id="bucketfs-signed-headers",
        )

    @classmethod
    def from_credentials(
        cls,
        key: str | None,
        secret: str | None,
        bucket: str,
        root: str = "",
        region: str = "us-east-1",
        endpoint: str | None = None,
        addressing_style: str = "virtual",
    ) -> S3Filesystem:
        """Build a provider with its own SigV4 client."""
        kwargs: dict = {
            "region_name": region,
            "config": Config(
                signature_version="s3v4",
                s3={"addressing_style": addressing_style},
            ),
        }
        if endpoint:
            kwargs["endpoint_url"] = endpoint
        if key and secret:
            kwargs["aws_access_key_id"] = key
            kwargs["aws_secret_access_key"] = secret
        client = boto3.client("s3", **kwargs)
        return cls(client=client, bucket=bucket, root=root)

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def client(self) -> Any:
        return self._client

    # ---- IFilesystemProvider methods ----

    async def get(self, path: str) -> File:
        key = resolve_path(self.root, path)
        content, size = await asyncio.to_thread(self._get_object, key)
        return File(
            name=key,
            source=FileSource.FILESYSTEM,
            path=key,
            content=content,
            size=size or 0,
        )

    async def create(self, path: str, content: ByteContent) -> File:
        key = resolve_path(self.root, path)
        content_type = content_type_for(key)
        if is_stream(content):
            reader = stream_reader(content, asyncio.get_running_loop())  # type: ignore[arg-type]
            extra_args = {"ContentType": content_type} if content_type else None
            await asyncio.to_thread(
                self._client.upload_fileobj, reader, self._bucket, key, ExtraArgs=extra_args,
            )
        else:
            kwargs: dict = {"Bucket": self._bucket, "Key": key, "Body": bytes(content)}  # type: ignore[arg-type]
            if content_type:
                kwargs["ContentType"] = content_type
            await asyncio.to_thread(self._client.put_object, **kwargs)
        logger.info("Stored s3://%s/%s (content-type=%s)", self._bucket, key, content_type)
        return File(name=key, source=FileSource.FILESYSTEM, path=key)

    async def exists(self, path: str) -> bool:
        key = resolve_path(self.root, path)
        try:
            await asyncio.to_thread(self._client.head_object, Bucket=self._bucket, Key=key)
        except ClientError as exc:
            if is_not_found(exc):
                logger.debug("s3://%s/%s not found", self._bucket, key)
                return False
            raise
        return True

    async def delete(self, path: str) -> None:
        key = resolve_path(self.root, path)
        await asyncio.to_thread(self._client.delete_object, Bucket=self._bucket, Key=key)
        logger.info("Deleted s3://%s/%s", self._bucket, key)

    def url(self, path: str) -> str:
        key = resolve_path(self.root, path)
        endpoint = (self._client.meta.endpoint_url or "").rstrip("/")
        base = endpoint.replace("://", f"://{self._bucket}.", 1)
        url = f"{base}/{quote(key, safe='/~')}"
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise URLConstructionError(url)
        return url

    async def temporary_url(
        self, path: str, expires_in: Expiry, headers: Mapping[str, str] | None = None
    ) -> str:
        self.url(path)
        key = resolve_path(self.root, path)
        seconds = expiry_seconds(expires_in)
        return await asyncio.to_thread(self._presign_get, key, seconds, dict(headers or {}))

    def directory(self, path: str) -> S3Filesystem:
        return S3Filesystem(client=self._client, bucket=self._bucket, root=join_root(self.root, path))

    # ---- blocking helpers, run in worker threads ----

    def _get_object(self, key: str) -> tuple[bytes, int | None]:
        logger.debug("GET s3://%s/%s", self._bucket, key)
        resp = self._client.get_object(Bucket=self._bucket, Key=key)
        body = resp["Body"]
        try:
            data = body.read()
        finally:
            body.close()
        return data, resp.get("ContentLength")

    def _presign_get(self, key: str, seconds: int, headers: dict[str, str]) -> str:
        token = _signed_headers.set(headers)
        try:
            return self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=seconds,
            )
        finally:
            _signed_headers.reset(token)
