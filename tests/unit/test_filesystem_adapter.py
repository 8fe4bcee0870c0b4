"""Unit tests for the boolean-result FilesystemAdapter."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

import local_fs
from local_fs.application import FilesystemAdapter, get_default_adapter, reset_default_adapter
from local_fs.domain.entities import Operation, OperationResult
from local_fs.domain.value_objects import FailureKind
from local_fs.infrastructure.config import Config, IOConfig
from local_fs.ports.outbound import DecodeError, NotFoundError


@pytest.mark.unit
class TestFilesystemAdapter:
    """Tests for FilesystemAdapter against the real disk."""

    def test_mutations_return_bool(self, adapter: FilesystemAdapter, temp_dir: Path) -> None:
        result = adapter.write(temp_dir / "f.txt", "x")

        assert result is True
        assert adapter.write(temp_dir / "missing" / "f.txt", "x") is False

    def test_reads_return_content(self, adapter: FilesystemAdapter, temp_dir: Path) -> None:
        (temp_dir / "f.bin").write_bytes(b"\x01\x02")

        assert adapter.read_binary(temp_dir / "f.bin") == b"\x01\x02"
        assert adapter.read_dir(temp_dir) == ["f.bin"]

    def test_read_errors_propagate(self, adapter: FilesystemAdapter, temp_dir: Path) -> None:
        (temp_dir / "bad.txt").write_bytes(b"\xff\xfe\xfd")

        with pytest.raises(NotFoundError):
            adapter.read_string(temp_dir / "missing.txt")
        with pytest.raises(DecodeError):
            adapter.read_string(temp_dir / "bad.txt")

    def test_failure_kinds_collapse_to_false(
        self, adapter: FilesystemAdapter, temp_dir: Path
    ) -> None:
        full = temp_dir / "full"
        full.mkdir()
        (full / "child").write_text("")

        assert adapter.create_dir(temp_dir / "a" / "b") is False
        assert adapter.remove_file(full) is False
        assert adapter.remove_dir(full) is False
        assert adapter.remove_file(temp_dir / "missing") is False

    def test_declared_names(self, adapter: FilesystemAdapter, temp_dir: Path) -> None:
        target = temp_dir / "a" / "b"

        assert adapter.createDirRecursive(target) is True
        assert adapter.write(target / "note.txt", "hi") is True
        assert adapter.readString(target / "note.txt") == "hi"
        assert adapter.readDir(target) == ["note.txt"]
        assert adapter.removeDirRecursive(temp_dir / "a") is True
        assert not (temp_dir / "a").exists()

    def test_from_config(self, temp_dir: Path) -> None:
        config = Config(io=IOConfig(sort_listings=False))

        adapter = FilesystemAdapter.from_config(config)

        assert adapter.backend.io_config.sort_listings is False  # type: ignore[attr-defined]


@pytest.mark.unit
class TestFilesystemAdapterDelegation:
    """Tests for delegation to an arbitrary FileSystemPort."""

    def test_collapses_port_results(self) -> None:
        backend = MagicMock()
        backend.copy.return_value = OperationResult.failed(
            Operation.COPY, "a", FailureKind.CROSS_DEVICE, target="b"
        )
        backend.hard_link.return_value = OperationResult.ok(Operation.HARD_LINK, "a", "b")

        adapter = FilesystemAdapter(backend)

        assert adapter.copy("a", "b") is False
        assert adapter.hardLink("a", "b") is True
        backend.copy.assert_called_once_with("a", "b")
        backend.hard_link.assert_called_once_with("a", "b")

    def test_reads_pass_through(self) -> None:
        backend = MagicMock()
        backend.read_binary.return_value = b"raw"

        assert FilesystemAdapter(backend).readBinary("p") == b"raw"


@pytest.mark.unit
class TestModuleFunctions:
    """Tests for the module-level functions on the shared adapter."""

    def test_shared_adapter_is_cached(self) -> None:
        reset_default_adapter()
        try:
            assert get_default_adapter() is get_default_adapter()
        finally:
            reset_default_adapter()

    def test_functions_round_trip(self, temp_dir: Path) -> None:
        path = temp_dir / "dir" / "file.txt"

        assert local_fs.create_dir_recursive(path.parent) is True
        assert local_fs.write(path, "payload") is True
        assert local_fs.read_string(path) == "payload"
        assert local_fs.copy(path, temp_dir / "copy.txt") is True
        assert local_fs.rename(temp_dir / "copy.txt", temp_dir / "moved.txt") is True
        assert local_fs.read_binary(temp_dir / "moved.txt") == b"payload"
        assert local_fs.remove_file(temp_dir / "moved.txt") is True
        assert local_fs.remove_dir_recursive(temp_dir / "dir") is True
        assert local_fs.read_dir(temp_dir) == []
