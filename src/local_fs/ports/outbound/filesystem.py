"""Filesystem port for path-based disk operations.

This outbound port defines the contract for the thirteen filesystem
primitives. Read operations return content and raise FileSystemError on
failure; mutating operations never raise for OS-level failures and report
them through OperationResult instead.

Paths are plain strings or os.PathLike objects. They are not validated
until the operation runs, and relative paths resolve against the current
working directory of the process.
"""

from __future__ import annotations

import os
from abc import abstractmethod
from typing import Protocol, Union

from local_fs.domain.entities import Operation, OperationResult
from local_fs.domain.value_objects import FailureKind

PathLike = Union[str, os.PathLike]


class FileSystemPort(Protocol):
    """Protocol for synchronous local filesystem access.

    Every call is independent: there is no locking across calls and no
    transactional guarantee between, for example, a read and a following
    write. Callers that need atomic replacement compose write and rename
    themselves.
    """

    @abstractmethod
    def read_binary(self, path: PathLike) -> bytes:
        """Read the exact bytes of a file.

        Raises:
            NotFoundError: If the file does not exist.
            PermissionDeniedError: If the file cannot be read.
            FileSystemError: For any other failure.
        """
        ...

    @abstractmethod
    def read_string(self, path: PathLike) -> str:
        """Read a file and decode it as strict UTF-8.

        Raises:
            NotFoundError: If the file does not exist.
            DecodeError: If the bytes are not valid UTF-8.
            FileSystemError: For any other failure.
        """
        ...

    @abstractmethod
    def read_dir(self, path: PathLike) -> list[str]:
        """List entry names directly inside a directory.

        Raises:
            NotFoundError: If the path is missing or not a directory.
            FileSystemError: For any other failure.
        """
        ...

    @abstractmethod
    def write(self, path: PathLike, contents: str) -> OperationResult:
        """Write text as UTF-8, replacing any existing file."""
        ...

    @abstractmethod
    def create_dir(self, path: PathLike) -> OperationResult:
        """Create a single directory whose parent already exists."""
        ...

    @abstractmethod
    def create_dir_recursive(self, path: PathLike) -> OperationResult:
        """Create a directory and all missing ancestors."""
        ...

    @abstractmethod
    def remove_file(self, path: PathLike) -> OperationResult:
        """Remove a file or symbolic link, never a directory."""
        ...

    @abstractmethod
    def remove_dir(self, path: PathLike) -> OperationResult:
        """Remove an empty directory."""
        ...

    @abstractmethod
    def remove_dir_recursive(self, path: PathLike) -> OperationResult:
        """Remove a directory and everything below it."""
        ...

    @abstractmethod
    def copy(self, source: PathLike, destination: PathLike) -> OperationResult:
        """Copy a file, overwriting the destination."""
        ...

    @abstractmethod
    def rename(self, source: PathLike, destination: PathLike) -> OperationResult:
        """Move an entry within the same filesystem."""
        ...

    @abstractmethod
    def soft_link(self, original: PathLike, link: PathLike) -> OperationResult:
        """Create a symbolic link at link pointing to original."""
        ...

    @abstractmethod
    def hard_link(self, original: PathLike, link: PathLike) -> OperationResult:
        """Create a second directory entry for the file at original."""
        ...


class FileSystemError(Exception):
    """Raised when a read operation fails.

    Attributes:
        operation: The operation that failed.
        path: The path it was called with.
        kind: The failure classification.
    """

    def __init__(
        self,
        operation: Operation,
        path: str,
        kind: FailureKind,
        message: str = "",
    ) -> None:
        self.operation = operation
        self.path = path
        self.kind = kind
        detail = f": {message}" if message else ""
        super().__init__(f"{operation.value}({path!r}) failed with {kind.value}{detail}")


class NotFoundError(FileSystemError):
    """Raised when the path is missing or is not the expected type."""

    pass


class PermissionDeniedError(FileSystemError):
    """Raised when the process may not read the path."""

    pass


class DecodeError(FileSystemError):
    """Raised when file contents are not valid UTF-8."""

    pass


def error_for(
    operation: Operation,
    path: str,
    kind: FailureKind,
    message: str = "",
) -> FileSystemError:
    """Build the FileSystemError subclass matching a failure kind."""
    if kind in (FailureKind.NOT_FOUND, FailureKind.NOT_A_DIRECTORY):
        return NotFoundError(operation, path, kind, message)
    if kind == FailureKind.PERMISSION_DENIED:
        return PermissionDeniedError(operation, path, kind, message)
    if kind == FailureKind.DECODE_ERROR:
        return DecodeError(operation, path, kind, message)
    return FileSystemError(operation, path, kind, message)
