"""Adapters between chunked byte content and blocking file objects."""

from __future__ import annotations

import asyncio
import io
from collections.abc import AsyncIterator, Callable, Iterable
from typing import Any

from bucketfs.core.types import ByteContent, ByteStream


def is_stream(content: ByteContent) -> bool:
    return not isinstance(content, (bytes, bytearray, memoryview))


class ChunkReader(io.RawIOBase):
    """Non-seekable raw reader pulling chunks from ``next_chunk`` on demand.

    ``next_chunk`` returns the next chunk, or None once the producer is done.
    """

    def __init__(self, next_chunk: Callable[[], bytes | None]) -> None:
        super().__init__()
        self._next_chunk = next_chunk
        self._pending = b""
        self._exhausted = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        while not self._pending and not self._exhausted:
            chunk = self._next_chunk()
            if chunk is None:
                self._exhausted = True
            else:
                self._pending = bytes(chunk)
        if not self._pending:
            return 0
        n = min(len(buffer), len(self._pending))
        buffer[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n


def _sync_puller(chunks: Iterable[bytes]) -> Callable[[], bytes | None]:
    iterator = iter(chunks)
    return lambda: next(iterator, None)


def _async_puller(chunks: Any, loop: asyncio.AbstractEventLoop) -> Callable[[], bytes | None]:
    # Must be called from a worker thread while ``loop`` keeps running.
    iterator = chunks.__aiter__()

    async def pull() -> bytes | None:
        try:
            return await iterator.__anext__()
        except StopAsyncIteration:
            return None

    return lambda: asyncio.run_coroutine_threadsafe(pull(), loop).result()


def stream_reader(chunks: ByteStream, loop: asyncio.AbstractEventLoop) -> io.BufferedReader:
    """Wrap a chunk producer in a blocking, non-seekable file object.

    Reads of ``n`` bytes return ``n`` bytes until the producer is exhausted.
    """
    if hasattr(chunks, "__aiter__"):
        puller = _async_puller(chunks, loop)
    else:
        puller = _sync_puller(chunks)  # type: ignore[arg-type]
    return io.BufferedReader(ChunkReader(puller))


async def iter_chunks(content: ByteContent) -> AsyncIterator[bytes]:
    """Yield ``content`` chunk by chunk whatever its shape."""
    if not is_stream(content):
        yield bytes(content)  # type: ignore[arg-type]
        return
    if hasattr(content, "__aiter__"):
        async for chunk in content:  # type: ignore[union-attr]
            yield chunk
    else:
        for chunk in content:  # type: ignore[union-attr]
            yield chunk
