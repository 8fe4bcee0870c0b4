"""Integration tests exercising whole filesystem workflows."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from local_fs.adapters.outbound import LocalFileSystem
from local_fs.application import FilesystemAdapter
from local_fs.domain.value_objects import FailureKind
from local_fs.ports.outbound import FileSystemError


@pytest.mark.integration
class TestFilesystemProperties:
    """Properties every implementation of the surface must hold."""

    @pytest.mark.parametrize(
        "text",
        ["", "plain ascii", "multi\nline\r\ntext\r", "ünïcödé ✓ 🚀", "\x00 nul inside"],
    )
    def test_write_then_read_string(
        self, adapter: FilesystemAdapter, temp_dir: Path, text: str
    ) -> None:
        path = temp_dir / "round.txt"

        assert adapter.write(path, text)
        assert adapter.read_string(path) == text

    def test_missing_paths_fail_reads(self, adapter: FilesystemAdapter, temp_dir: Path) -> None:
        missing = temp_dir / "does" / "not" / "exist"

        with pytest.raises(FileSystemError):
            adapter.read_binary(missing)
        with pytest.raises(FileSystemError):
            adapter.read_string(missing)

    def test_create_then_remove_recursive(
        self, adapter: FilesystemAdapter, temp_dir: Path
    ) -> None:
        path = temp_dir / "x" / "y" / "z"

        assert adapter.create_dir_recursive(path)
        assert adapter.create_dir_recursive(path)
        assert adapter.remove_dir_recursive(temp_dir / "x")
        assert not (temp_dir / "x").exists()

    def test_copy_snapshot(self, adapter: FilesystemAdapter, temp_dir: Path) -> None:
        a = temp_dir / "a.bin"
        b = temp_dir / "b.bin"
        a.write_bytes(os.urandom(4096))
        before = adapter.read_binary(a)

        assert adapter.copy(a, b)
        assert adapter.write(a, "changed afterwards")
        assert adapter.read_binary(b) == before

    def test_listing_contains_exactly_entries(
        self, adapter: FilesystemAdapter, temp_dir: Path
    ) -> None:
        assert adapter.write(temp_dir / "x", "")
        assert adapter.write(temp_dir / "y", "")

        assert set(adapter.read_dir(temp_dir)) == {"x", "y"}


@pytest.mark.integration
class TestAtomicReplace:
    """Callers compose write and rename for atomic replacement."""

    def test_write_then_rename(self, fs: LocalFileSystem, temp_dir: Path) -> None:
        final = temp_dir / "config.json"
        staging = temp_dir / "config.json.tmp"
        assert fs.write(final, '{"v": 1}')

        assert fs.write(staging, '{"v": 2}')
        assert fs.rename(staging, final)

        assert fs.read_string(final) == '{"v": 2}'
        assert fs.read_dir(temp_dir) == ["config.json"]


@pytest.mark.integration
class TestProjectLayout:
    """A realistic sequence of operations on a small project tree."""

    def test_tree_lifecycle(self, fs: LocalFileSystem, temp_dir: Path) -> None:
        root = temp_dir / "project"

        assert fs.create_dir(root)
        assert fs.create_dir_recursive(root / "src" / "pkg")
        assert fs.write(root / "src" / "pkg" / "main.py", "print('hi')\n")
        assert fs.copy(root / "src" / "pkg" / "main.py", root / "src" / "pkg" / "backup.py")
        assert fs.hard_link(root / "src" / "pkg" / "main.py", root / "main.py")

        assert fs.read_dir(root) == ["main.py", "src"]
        assert fs.read_dir(root / "src" / "pkg") == ["backup.py", "main.py"]

        not_empty = fs.remove_dir(root / "src")
        assert not not_empty
        assert not_empty.kind in (FailureKind.DIRECTORY_NOT_EMPTY, FailureKind.ALREADY_EXISTS)

        assert fs.remove_file(root / "main.py")
        assert fs.read_string(root / "src" / "pkg" / "main.py") == "print('hi')\n"

        assert fs.remove_dir_recursive(root)
        assert fs.read_dir(temp_dir) == []
