"""bucketfs exception hierarchy.

S3 backend failures are not wrapped: they surface as the botocore exception
the client raised. ``StorageError`` names that type for callers that want to
catch it without importing botocore.
"""

from __future__ import annotations

from botocore.exceptions import ClientError

StorageError = ClientError


class BucketFSError(Exception):
    """Base exception for all bucketfs errors."""


class URLConstructionError(BucketFSError):
    """A file URL could not be assembled into a well-formed URL."""

    def __init__(self, url: str, reason: str = "not a well-formed URL") -> None:
        self.url = url
        super().__init__(f"Cannot build URL {url!r}: {reason}")


class FileNotFoundInStorage(BucketFSError):
    """No file stored at the given path (memory and local backends)."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path!r}")


class UnsupportedOperationError(BucketFSError):
    """The backend cannot provide the requested operation."""


class FileContentMissingError(BucketFSError):
    """A file was handed to a write without any content."""
