"""Tests for storage adapters and folder materialization."""

import sys
import os
import asyncio
import math
from unittest.mock import AsyncMock, Mock

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from syncpath.exceptions import InvalidArgumentError
from syncpath.storage import (
    EntryStat, StorageAdapter, StorageError, LocalStorageAdapter,
    MemoryStorageAdapter, fix_stat, stat_fixed, mkdirp
)


def create_mock_adapter(existing=()):
    """Create a mock adapter that reports the given folders as existing."""
    adapter = Mock(spec=StorageAdapter)
    adapter.exists = AsyncMock(side_effect=lambda path: path in existing)
    adapter.mkdir = AsyncMock(return_value=None)
    return adapter


class TestMkdirp:
    """Folder materialization through a storage adapter."""

    @pytest.mark.asyncio
    async def test_checks_levels_in_order(self):
        adapter = create_mock_adapter(existing={"a"})

        created = await mkdirp("a/b/c/d.txt", adapter)

        assert [c.args[0] for c in adapter.exists.await_args_list] == ["a", "a/b", "a/b/c"]
        assert [c.args[0] for c in adapter.mkdir.await_args_list] == ["a/b", "a/b/c"]
        assert created == ["a/b", "a/b/c"]

    @pytest.mark.asyncio
    async def test_nothing_created_when_all_exist(self):
        adapter = create_mock_adapter(existing={"a", "a/b"})

        created = await mkdirp("a/b/c.md", adapter)

        assert created == []
        adapter.mkdir.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_top_level_file_touches_nothing(self):
        adapter = create_mock_adapter()

        assert await mkdirp("note.md", adapter) == []
        adapter.exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_creation_is_not_fatal(self):
        adapter = create_mock_adapter()
        adapter.mkdir = AsyncMock(side_effect=[FileExistsError("a"), None])

        created = await mkdirp("a/b/c.md", adapter)

        assert created == ["a/b"]
        assert adapter.mkdir.await_count == 2

    @pytest.mark.asyncio
    async def test_wrapped_file_exists_is_not_fatal(self):
        adapter = create_mock_adapter()
        wrapped = StorageError("already there", path="a")
        wrapped.__cause__ = FileExistsError("a")
        adapter.mkdir = AsyncMock(side_effect=[wrapped])

        assert await mkdirp("a/b.md", adapter) == []

    @pytest.mark.asyncio
    async def test_mkdir_failure_carries_level(self):
        adapter = create_mock_adapter(existing={"a"})
        adapter.mkdir = AsyncMock(side_effect=PermissionError("denied"))

        with pytest.raises(StorageError) as exc_info:
            await mkdirp("a/b/c/d.md", adapter)

        assert exc_info.value.path == "a/b"
        assert isinstance(exc_info.value.__cause__, PermissionError)
        # stops at the failing level
        assert adapter.mkdir.await_count == 1

    @pytest.mark.asyncio
    async def test_exists_failure_carries_level(self):
        adapter = create_mock_adapter()
        adapter.exists = AsyncMock(side_effect=[False, OSError("io")])

        with pytest.raises(StorageError) as exc_info:
            await mkdirp("a/b/c.md", adapter)

        assert exc_info.value.path == "a/b"
        assert "a/b" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_adapter_storage_error_gets_level(self):
        adapter = create_mock_adapter()
        adapter.exists = AsyncMock(side_effect=StorageError("backend down"))

        with pytest.raises(StorageError) as exc_info:
            await mkdirp("a/b.md", adapter)

        assert exc_info.value.path == "a"

    @pytest.mark.asyncio
    async def test_no_rollback_on_failure(self):
        adapter = MemoryStorageAdapter()
        # a file sitting where a folder level is expected, parent not created
        adapter.files["a/b"] = (10, 0.0)

        with pytest.raises(StorageError):
            await mkdirp("a/b/c/d.md", adapter)

        assert "a" in adapter.folders


class TestMemoryStorageAdapter:

    @pytest.mark.asyncio
    async def test_mkdirp_records_calls(self):
        adapter = MemoryStorageAdapter()

        await mkdirp("a/b/c/d.txt", adapter)

        assert adapter.calls == [
            ("exists", "a"), ("mkdir", "a"),
            ("exists", "a/b"), ("mkdir", "a/b"),
            ("exists", "a/b/c"), ("mkdir", "a/b/c"),
        ]
        assert await adapter.exists("a/b/c")

    @pytest.mark.asyncio
    async def test_mkdir_requires_parent(self):
        adapter = MemoryStorageAdapter()

        with pytest.raises(StorageError):
            await adapter.mkdir("a/b")

    @pytest.mark.asyncio
    async def test_mkdir_existing_raises_file_exists(self):
        adapter = MemoryStorageAdapter()
        await adapter.mkdir("a")

        with pytest.raises(FileExistsError):
            await adapter.mkdir("a")

    @pytest.mark.asyncio
    async def test_concurrent_overlapping_chains(self):
        adapter = MemoryStorageAdapter()

        results = await asyncio.gather(
            mkdirp("shared/x/one.md", adapter),
            mkdirp("shared/x/two.md", adapter),
            mkdirp("shared/y/three.md", adapter),
        )

        assert set(adapter.folders) == {"shared", "shared/x", "shared/y"}
        created = [level for result in results for level in result]
        assert sorted(created) == ["shared", "shared/x", "shared/y"]

    @pytest.mark.asyncio
    async def test_stat(self):
        adapter = MemoryStorageAdapter()
        adapter.add_file("a/b.md", 42)

        file_stat = await adapter.stat("a/b.md")
        folder_stat = await adapter.stat("a")

        assert file_stat.type == "file"
        assert file_stat.size == 42
        assert folder_stat.is_folder
        assert await adapter.stat("missing") is None


class TestLocalStorageAdapter:

    @pytest.fixture
    def adapter(self, tmp_path):
        return LocalStorageAdapter(tmp_path)

    @pytest.mark.asyncio
    async def test_mkdirp_creates_folders(self, adapter, tmp_path):
        created = await mkdirp("a/b/c/d.txt", adapter)

        assert created == ["a", "a/b", "a/b/c"]
        assert (tmp_path / "a" / "b" / "c").is_dir()
        assert not (tmp_path / "a" / "b" / "c" / "d.txt").exists()

    @pytest.mark.asyncio
    async def test_mkdirp_is_repeatable(self, adapter):
        await mkdirp("a/b/c.md", adapter)

        assert await mkdirp("a/b/c.md", adapter) == []

    @pytest.mark.asyncio
    async def test_mkdir_existing_raises_file_exists(self, adapter):
        await adapter.mkdir("a")

        with pytest.raises(FileExistsError):
            await adapter.mkdir("a")

    @pytest.mark.asyncio
    async def test_mkdir_missing_parent_is_storage_error(self, adapter):
        with pytest.raises(StorageError) as exc_info:
            await adapter.mkdir("x/y")

        assert exc_info.value.path == "x/y"

    @pytest.mark.asyncio
    async def test_stat(self, adapter, tmp_path):
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "a.txt").write_bytes(b"hello")

        file_stat = await adapter.stat("docs/a.txt")
        folder_stat = await stat_fixed(adapter, "docs")

        assert file_stat.type == "file"
        assert file_stat.size == 5
        assert file_stat.mtime > 0
        assert folder_stat.type == "folder"
        assert folder_stat.size == 0
        assert await adapter.stat("docs/missing.txt") is None

    def test_resolve_stays_under_root(self, adapter, tmp_path):
        assert adapter.resolve("../../etc/passwd") == (tmp_path / "etc" / "passwd").resolve()
        assert adapter.resolve("/") == tmp_path.resolve()

    def test_resolve_rejects_symlink_escape(self, adapter, tmp_path):
        outside = tmp_path.parent / f"{tmp_path.name}_outside"
        outside.mkdir()
        (tmp_path / "link").symlink_to(outside, target_is_directory=True)

        with pytest.raises(InvalidArgumentError):
            adapter.resolve("link/file.txt")


class TestFixStat:

    def test_none_passes_through(self):
        assert fix_stat(None) is None

    def test_nan_values_cleared(self):
        stat = EntryStat(type="folder", ctime=math.nan, mtime=math.nan, size=None)

        fixed = fix_stat(stat)

        assert fixed.ctime is None
        assert fixed.mtime is None
        assert fixed.size == 0
        # original untouched
        assert math.isnan(stat.ctime)

    def test_file_without_size_keeps_none(self):
        fixed = fix_stat(EntryStat(type="file", ctime=1.0, mtime=2.0))

        assert fixed.size is None
        assert fixed.to_dict() == {"type": "file", "ctime": 1.0, "mtime": 2.0, "size": None}
