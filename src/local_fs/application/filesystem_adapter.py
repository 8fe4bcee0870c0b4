"""Boolean-result facade over the filesystem port.

FilesystemAdapter keeps the original declared surface: reads return
content or raise, every mutating operation returns a plain bool. The
failure kind behind a False is not lost entirely; it is logged before the
result is collapsed. Callers that need it should use LocalFileSystem
directly.

Usage:
    from local_fs import FilesystemAdapter

    fs = FilesystemAdapter()
    if fs.create_dir_recursive("build/out"):
        fs.write("build/out/report.txt", "done")

    # The declared camelCase names are available too
    fs.readString("build/out/report.txt")
"""

from __future__ import annotations

from local_fs.adapters.outbound import LocalFileSystem
from local_fs.domain.entities import OperationResult
from local_fs.infrastructure.config import Config
from local_fs.infrastructure.logging import get_logger
from local_fs.ports.outbound import FileSystemPort, PathLike


class FilesystemAdapter:
    """Synchronous facade returning booleans for mutating operations.

    The adapter holds no state besides its backend; concurrent callers may
    share one instance.
    """

    def __init__(self, backend: FileSystemPort | None = None) -> None:
        """Initialize the adapter.

        Args:
            backend: Filesystem port to delegate to (default LocalFileSystem).
        """
        self._backend = backend if backend is not None else LocalFileSystem()
        self._logger = get_logger(__name__, component="filesystem_adapter")

    @classmethod
    def from_config(cls, config: Config) -> FilesystemAdapter:
        """Create an adapter backed by a LocalFileSystem using config.io."""
        return cls(LocalFileSystem(io_config=config.io))

    @property
    def backend(self) -> FileSystemPort:
        """Return the port this adapter delegates to."""
        return self._backend

    def read_binary(self, path: PathLike) -> bytes:
        return self._backend.read_binary(path)

    def read_string(self, path: PathLike) -> str:
        return self._backend.read_string(path)

    def read_dir(self, path: PathLike) -> list[str]:
        return self._backend.read_dir(path)

    def write(self, path: PathLike, contents: str) -> bool:
        return self._collapse(self._backend.write(path, contents))

    def create_dir(self, path: PathLike) -> bool:
        return self._collapse(self._backend.create_dir(path))

    def create_dir_recursive(self, path: PathLike) -> bool:
        return self._collapse(self._backend.create_dir_recursive(path))

    def remove_file(self, path: PathLike) -> bool:
        return self._collapse(self._backend.remove_file(path))

    def remove_dir(self, path: PathLike) -> bool:
        return self._collapse(self._backend.remove_dir(path))

    def remove_dir_recursive(self, path: PathLike) -> bool:
        return self._collapse(self._backend.remove_dir_recursive(path))

    def copy(self, source: PathLike, destination: PathLike) -> bool:
        return self._collapse(self._backend.copy(source, destination))

    def rename(self, source: PathLike, destination: PathLike) -> bool:
        return self._collapse(self._backend.rename(source, destination))

    def soft_link(self, original: PathLike, link: PathLike) -> bool:
        return self._collapse(self._backend.soft_link(original, link))

    def hard_link(self, original: PathLike, link: PathLike) -> bool:
        return self._collapse(self._backend.hard_link(original, link))

    # Declared names
    readBinary = read_binary
    readString = read_string
    readDir = read_dir
    createDir = create_dir
    createDirRecursive = create_dir_recursive
    removeFile = remove_file
    removeDir = remove_dir
    removeDirRecursive = remove_dir_recursive
    softLink = soft_link
    hardLink = hard_link

    def _collapse(self, result: OperationResult) -> bool:
        if not result.success:
            self._logger.debug(
                "fs_failure_collapsed",
                operation=result.operation.metric_name,
                path=result.path,
                kind=result.kind.value if result.kind else None,
            )
        return result.success


# Process-wide adapter behind the module-level functions
_default_adapter: FilesystemAdapter | None = None


def get_default_adapter() -> FilesystemAdapter:
    """Get the shared adapter, creating it on first use."""
    global _default_adapter
    if _default_adapter is None:
        _default_adapter = FilesystemAdapter()
    return _default_adapter


def reset_default_adapter() -> None:
    """Drop the shared adapter (useful for testing)."""
    global _default_adapter
    _default_adapter = None


def read_binary(path: PathLike) -> bytes:
    """Read the exact bytes of a file."""
    return get_default_adapter().read_binary(path)


def read_string(path: PathLike) -> str:
    """Read a file as UTF-8 text."""
    return get_default_adapter().read_string(path)


def read_dir(path: PathLike) -> list[str]:
    """List entry names in a directory."""
    return get_default_adapter().read_dir(path)


def write(path: PathLike, contents: str) -> bool:
    """Write text to a file, replacing it."""
    return get_default_adapter().write(path, contents)


def create_dir(path: PathLike) -> bool:
    return get_default_adapter().create_dir(path)


def create_dir_recursive(path: PathLike) -> bool:
    return get_default_adapter().create_dir_recursive(path)


def remove_file(path: PathLike) -> bool:
    return get_default_adapter().remove_file(path)


def remove_dir(path: PathLike) -> bool:
    return get_default_adapter().remove_dir(path)


def remove_dir_recursive(path: PathLike) -> bool:
    return get_default_adapter().remove_dir_recursive(path)


def copy(source: PathLike, destination: PathLike) -> bool:
    return get_default_adapter().copy(source, destination)


def rename(source: PathLike, destination: PathLike) -> bool:
    return get_default_adapter().rename(source, destination)


def soft_link(original: PathLike, link: PathLike) -> bool:
    return get_default_adapter().soft_link(original, link)


def hard_link(original: PathLike, link: PathLike) -> bool:
    return get_default_adapter().hard_link(original, link)
