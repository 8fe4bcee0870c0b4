"""Local-disk implementation of the FileSystemPort.

This adapter translates the thirteen path-based operations into OS calls
through os, shutil and pathlib. It is stateless between calls: every
operation opens and closes whatever handles it needs before returning.

Failure handling:
    - Read operations raise a FileSystemError subclass chosen from the
      FailureKind of the underlying OSError or UnicodeDecodeError.
    - Mutating operations never raise for OS-level failures. They return
      an OperationResult carrying the FailureKind instead.
    - Programming errors (wrong argument types) propagate unchanged.

Each call runs inside an OpenTelemetry span, is timed into the Prometheus
registry and is logged through structlog.
"""

from __future__ import annotations

import os
import shutil
import time
from pathlib import Path
from typing import Callable, TypeVar

from opentelemetry.trace import Status, StatusCode

from local_fs.domain.entities import Operation, OperationResult
from local_fs.domain.value_objects import FailureKind
from local_fs.infrastructure.config import IOConfig, get_config
from local_fs.infrastructure.logging import get_logger
from local_fs.infrastructure.metrics import MetricsRegistry, get_metrics
from local_fs.infrastructure.tracing import operation_span
from local_fs.ports.outbound import PathLike, error_for

T = TypeVar("T")

ENCODING = "utf-8"


class _Refused(Exception):
    """Internal signal for a failure the adapter classifies itself."""

    def __init__(self, kind: FailureKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class LocalFileSystem:
    """Local filesystem implementation of the FileSystemPort protocol.

    Attributes:
        io_config: I/O behaviour (fsync on write, permission copying,
            listing order).
    """

    def __init__(
        self,
        io_config: IOConfig | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            io_config: I/O behaviour (default from config).
            metrics: Metrics registry (default is the global registry).
        """
        self._io = io_config or get_config().io
        self._metrics = metrics or get_metrics()
        self._logger = get_logger(__name__, component="local_filesystem")

    @property
    def io_config(self) -> IOConfig:
        """Return the I/O configuration in use."""
        return self._io

    # =========================================================================
    # Read operations
    # =========================================================================

    def read_binary(self, path: PathLike) -> bytes:
        """Read the exact bytes of a file.

        Args:
            path: File to read.

        Returns:
            The file contents.

        Raises:
            NotFoundError: If the file does not exist.
            PermissionDeniedError: If the file cannot be read.
            FileSystemError: For any other failure.
        """
        path_str = os.fspath(path)
        data = self._read(Operation.READ_BINARY, path_str, Path(path_str).read_bytes)
        self._metrics.bytes_read_total.inc(len(data))
        return data

    def read_string(self, path: PathLike) -> str:
        """Read a file as strict UTF-8 text.

        No newline translation is applied, and a leading byte order mark is
        kept as U+FEFF.

        Args:
            path: File to read.

        Returns:
            The decoded contents.

        Raises:
            NotFoundError: If the file does not exist.
            DecodeError: If the bytes are not valid UTF-8.
            FileSystemError: For any other failure.
        """
        path_str = os.fspath(path)
        raw = Path(path_str)

        def read() -> tuple[int, str]:
            data = raw.read_bytes()
            return len(data), data.decode(ENCODING)

        size, text = self._read(Operation.READ_STRING, path_str, read)
        self._metrics.bytes_read_total.inc(size)
        return text

    def read_dir(self, path: PathLike) -> list[str]:
        """List entry names directly inside a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names without the directory prefix, sorted by name unless
            sort_listings is disabled.

        Raises:
            NotFoundError: If the path is missing or not a directory.
            FileSystemError: For any other failure.
        """
        path_str = os.fspath(path)
        names = self._read(Operation.READ_DIR, path_str, lambda: os.listdir(path_str))
        if self._io.sort_listings:
            names.sort()
        return names

    # =========================================================================
    # Mutating operations
    # =========================================================================

    def write(self, path: PathLike, contents: str) -> OperationResult:
        """Write text as UTF-8, truncating any existing file.

        The parent directory must already exist. Text is encoded before the
        file is opened, so an unencodable string leaves the old file intact.
        """
        if not isinstance(contents, str):
            raise TypeError(f"contents must be str, not {type(contents).__name__}")

        path_str = os.fspath(path)

        def write() -> None:
            data = contents.encode(ENCODING)
            with open(path_str, "wb") as handle:
                handle.write(data)
                if self._io.sync_mode == "fsync":
                    handle.flush()
                    os.fsync(handle.fileno())
            self._metrics.bytes_written_total.inc(len(data))

        return self._execute(Operation.WRITE, path_str, write)

    def create_dir(self, path: PathLike) -> OperationResult:
        """Create one directory. Fails if the parent is missing or the path exists."""
        path_str = os.fspath(path)
        return self._execute(Operation.CREATE_DIR, path_str, lambda: os.mkdir(path_str))

    def create_dir_recursive(self, path: PathLike) -> OperationResult:
        """Create a directory and all missing ancestors.

        Succeeds when the directory already exists. Fails with
        ALREADY_EXISTS when a non-directory occupies the path.
        """
        path_str = os.fspath(path)
        return self._execute(
            Operation.CREATE_DIR_RECURSIVE,
            path_str,
            lambda: os.makedirs(path_str, exist_ok=True),
        )

    def remove_file(self, path: PathLike) -> OperationResult:
        """Remove a file or a symbolic link.

        Directories are refused with IS_A_DIRECTORY. A symbolic link is
        removed itself; its target is left alone.
        """
        path_str = os.fspath(path)

        def remove() -> None:
            try:
                os.remove(path_str)
            except PermissionError as exc:
                # macOS and Windows report unlink() on a directory as EPERM/EACCES
                if not os.path.isdir(path_str):
                    raise
                if os.path.islink(path_str):
                    # Windows directory symlink
                    os.rmdir(path_str)
                    return
                raise _Refused(FailureKind.IS_A_DIRECTORY, "path is a directory") from exc

        return self._execute(Operation.REMOVE_FILE, path_str, remove)

    def remove_dir(self, path: PathLike) -> OperationResult:
        """Remove an empty directory."""
        path_str = os.fspath(path)
        return self._execute(Operation.REMOVE_DIR, path_str, lambda: os.rmdir(path_str))

    def remove_dir_recursive(self, path: PathLike) -> OperationResult:
        """Remove a directory and all of its contents.

        A symbolic link to a directory is refused with NOT_A_DIRECTORY so the
        link target is never walked. Entries deleted before a failure stay
        deleted.
        """
        path_str = os.fspath(path)

        def remove() -> None:
            try:
                shutil.rmtree(path_str)
            except OSError as exc:
                # rmtree refuses symlinks itself, with a bare OSError
                if exc.errno is None and os.path.islink(path_str):
                    raise _Refused(
                        FailureKind.NOT_A_DIRECTORY, "path is a symbolic link"
                    ) from exc
                raise

        return self._execute(Operation.REMOVE_DIR_RECURSIVE, path_str, remove)

    def copy(self, source: PathLike, destination: PathLike) -> OperationResult:
        """Copy file contents, overwriting the destination.

        Symbolic links in source are followed. Permission bits are copied
        when copy_permissions is enabled; failing to copy them is logged and
        does not fail the operation, since the contents are already in place.
        """
        source_str = os.fspath(source)
        destination_str = os.fspath(destination)

        def copy() -> None:
            try:
                shutil.copyfile(source_str, destination_str)
            except (IsADirectoryError, PermissionError) as exc:
                # Windows reports opening a directory as EACCES
                if os.path.isdir(source_str):
                    raise _Refused(FailureKind.IS_A_DIRECTORY, "source is a directory") from exc
                if os.path.isdir(destination_str):
                    raise _Refused(
                        FailureKind.IS_A_DIRECTORY, "destination is a directory"
                    ) from exc
                raise

            if not self._io.copy_permissions:
                return
            try:
                shutil.copymode(source_str, destination_str)
            except OSError as exc:
                self._logger.warning(
                    "fs_copy_permissions_skipped",
                    path=source_str,
                    target=destination_str,
                    kind=FailureKind.from_exception(exc).value,
                    error=_describe(exc),
                )

        return self._execute(Operation.COPY, source_str, copy, target=destination_str)

    def rename(self, source: PathLike, destination: PathLike) -> OperationResult:
        """Move an entry, replacing the destination if it exists.

        Moves across filesystems fail with CROSS_DEVICE; no copy fallback is
        attempted.
        """
        source_str = os.fspath(source)
        destination_str = os.fspath(destination)
        return self._execute(
            Operation.RENAME,
            source_str,
            lambda: os.replace(source_str, destination_str),
            target=destination_str,
        )

    def soft_link(self, original: PathLike, link: PathLike) -> OperationResult:
        """Create a symbolic link at link pointing to original.

        The original does not have to exist. A relative original is stored
        as given and resolved against the directory holding the link.
        """
        original_str = os.fspath(original)
        link_str = os.fspath(link)

        def symlink() -> None:
            target_is_directory = False
            if os.name == "nt":
                resolved = os.path.join(os.path.dirname(link_str), original_str)
                target_is_directory = os.path.isdir(resolved)
            os.symlink(original_str, link_str, target_is_directory=target_is_directory)

        return self._execute(Operation.SOFT_LINK, original_str, symlink, target=link_str)

    def hard_link(self, original: PathLike, link: PathLike) -> OperationResult:
        """Create a hard link at link for the file at original.

        Fails with CROSS_DEVICE when the two paths are on different
        filesystems.
        """
        original_str = os.fspath(original)
        link_str = os.fspath(link)

        def link_entry() -> None:
            if not hasattr(os, "link"):
                raise _Refused(FailureKind.UNSUPPORTED, "hard links are not available")
            os.link(original_str, link_str)

        return self._execute(Operation.HARD_LINK, original_str, link_entry, target=link_str)

    # =========================================================================
    # Internals
    # =========================================================================

    def _read(self, operation: Operation, path: str, action: Callable[[], T]) -> T:
        """Run a read action, raising a FileSystemError on failure."""
        start = time.perf_counter()
        with operation_span(operation.metric_name, path) as span:
            try:
                value = action()
            except (OSError, ValueError) as exc:
                kind = FailureKind.from_exception(exc)
                message = _describe(exc)
                self._fail_span(span, kind, message)
                self._metrics.record(
                    operation.metric_name, time.perf_counter() - start, kind.value
                )
                self._logger.info(
                    "fs_operation_failed",
                    operation=operation.metric_name,
                    path=path,
                    kind=kind.value,
                    error=message,
                )
                raise error_for(operation, path, kind, message) from exc

        self._metrics.record(operation.metric_name, time.perf_counter() - start)
        self._logger.debug("fs_operation_succeeded", operation=operation.metric_name, path=path)
        return value

    def _execute(
        self,
        operation: Operation,
        path: str,
        action: Callable[[], None],
        target: str | None = None,
    ) -> OperationResult:
        """Run a mutating action and fold any OS failure into the result."""
        start = time.perf_counter()
        with operation_span(operation.metric_name, path, target) as span:
            try:
                action()
            except _Refused as exc:
                result = OperationResult.failed(operation, path, exc.kind, str(exc), target)
            except (OSError, ValueError) as exc:
                result = OperationResult.failed(
                    operation,
                    path,
                    FailureKind.from_exception(exc),
                    _describe(exc),
                    target,
                )
            else:
                result = OperationResult.ok(operation, path, target)

            if result.kind is not None:
                self._fail_span(span, result.kind, result.message)

        kind_value = result.kind.value if result.kind else None
        self._metrics.record(operation.metric_name, time.perf_counter() - start, kind_value)

        if result.success:
            self._logger.debug(
                "fs_operation_succeeded",
                operation=operation.metric_name,
                path=path,
                target=target,
            )
        else:
            self._logger.info("fs_operation_failed", **result.to_dict())

        return result

    @staticmethod
    def _fail_span(span, kind: FailureKind, message: str) -> None:
        span.set_attribute("fs.failure_kind", kind.value)
        span.set_status(Status(StatusCode.ERROR, message))


def _describe(exc: BaseException) -> str:
    """Render an exception as a short message without the path repeated."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or type(exc).__name__
