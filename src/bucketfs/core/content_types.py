"""Content-type inference from file extensions."""

from __future__ import annotations

import mimetypes

# Types missing from some platform mime.types files.
_EXTRA_TYPES = {
    "webp": "image/webp",
    "avif": "image/avif",
    "md": "text/markdown",
    "json": "application/json",
    "wasm": "application/wasm",
}


def extension_of(path: str) -> str | None:
    """Return the text after the last ``.`` in ``path``, or None without one.

    A trailing dot yields the empty string.
    """
    if "." not in path:
        return None
    return path.rsplit(".", 1)[1]


def content_type_for_extension(extension: str) -> str | None:
    ext = extension.lower()
    if not ext or "/" in ext:
        return None
    if ext in _EXTRA_TYPES:
        return _EXTRA_TYPES[ext]
    if not mimetypes.inited:
        mimetypes.init()
    return mimetypes.types_map.get(f".{ext}")


def content_type_for(path: str) -> str | None:
    """Infer a MIME type from the final dot-separated extension of ``path``."""
    extension = extension_of(path)
    if extension is None:
        return None
    return content_type_for_extension(extension)
