"""Unit tests for MemoryFilesystem."""

from __future__ import annotations

import pytest

from bucketfs.core.exceptions import FileNotFoundInStorage
from bucketfs.core.protocols import IFilesystemProvider
from tests.fakes import MemoryFilesystem


@pytest.fixture
def memory_fs():
    return MemoryFilesystem(root="data")


def test_satisfies_provider_protocol(memory_fs):
    assert isinstance(memory_fs, IFilesystemProvider)


class TestCreateAndGet:
    @pytest.mark.asyncio
    async def test_round_trip_under_root(self, memory_fs):
        await memory_fs.create("a/b.txt", b"hello")
        assert memory_fs.files == {"data/a/b.txt": b"hello"}
        result = await memory_fs.get("a/b.txt")
        assert result.content == b"hello"
        assert result.size == 5

    @pytest.mark.asyncio
    async def test_records_content_type(self, memory_fs):
        await memory_fs.create("a/b.txt", b"hello")
        await memory_fs.create("README", b"read me")
        assert memory_fs.content_type_of("data/a/b.txt") == "text/plain"
        assert memory_fs.content_type_of("data/README") is None

    @pytest.mark.asyncio
    async def test_joins_async_chunks(self, memory_fs):
        async def chunks():
            yield b"ab"
            yield b"cd"

        await memory_fs.create("joined.bin", chunks())
        assert memory_fs.files["data/joined.bin"] == b"abcd"

    @pytest.mark.asyncio
    async def test_get_missing_raises(self, memory_fs):
        with pytest.raises(FileNotFoundInStorage) as excinfo:
            await memory_fs.get("nope.txt")
        assert excinfo.value.path == "data/nope.txt"


class TestExistsAndDelete:
    @pytest.mark.asyncio
    async def test_exists_tracks_lifecycle(self, memory_fs):
        assert await memory_fs.exists("x.txt") is False
        await memory_fs.create("x.txt", b"x")
        assert await memory_fs.exists("x.txt") is True
        await memory_fs.delete("x.txt")
        assert await memory_fs.exists("x.txt") is False

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, memory_fs):
        await memory_fs.delete("never.txt")  # should not raise


class TestUrls:
    def test_url(self, memory_fs):
        assert memory_fs.url("a.txt") == "memory://data/a.txt"

    @pytest.mark.asyncio
    async def test_temporary_url_carries_expiry(self, memory_fs):
        assert await memory_fs.temporary_url("a.txt", 30) == "memory://data/a.txt?expires=30"


class TestDirectory:
    @pytest.mark.asyncio
    async def test_views_share_store(self, memory_fs):
        images = memory_fs.directory("images")
        await images.create("logo.png", b"png")
        assert await memory_fs.exists("images/logo.png") is True
        assert images.content_type_of("data/images/logo.png") == "image/png"

    def test_parent_root_unchanged(self, memory_fs):
        memory_fs.directory("images")
        assert memory_fs.root == "data"
