"""Operation outcomes for mutating filesystem calls.

A mutating call (write, create, remove, copy, rename, link) either fully
succeeds or fails with a single FailureKind. Partial success is never
reported; a failed recursive removal may still have deleted some entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from local_fs.domain.value_objects import FailureKind


class Operation(Enum):
    """Filesystem operations offered by the layer.

    Values are the names of the original declared surface.
    """

    READ_BINARY = "readBinary"
    READ_STRING = "readString"
    READ_DIR = "readDir"
    WRITE = "write"
    CREATE_DIR = "createDir"
    CREATE_DIR_RECURSIVE = "createDirRecursive"
    REMOVE_FILE = "removeFile"
    REMOVE_DIR = "removeDir"
    REMOVE_DIR_RECURSIVE = "removeDirRecursive"
    COPY = "copy"
    RENAME = "rename"
    SOFT_LINK = "softLink"
    HARD_LINK = "hardLink"

    @property
    def metric_name(self) -> str:
        """Snake-case label used for logs, spans and metrics."""
        return self.name.lower()


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single mutating operation.

    Instances are truthy exactly when the operation succeeded, so callers
    that only care about the boolean contract can use them directly.

    Attributes:
        operation: The operation that was attempted.
        path: The primary path (source for two-path operations).
        success: Whether the operation completed.
        kind: Failure classification, None on success.
        message: OS error text, empty on success.
        target: Destination path for copy, rename and link operations.
    """

    operation: Operation
    path: str
    success: bool
    kind: FailureKind | None = None
    message: str = ""
    target: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.kind is not None:
            raise ValueError("A successful result cannot carry a failure kind")
        if not self.success and self.kind is None:
            raise ValueError("A failed result must carry a failure kind")

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(
        cls,
        operation: Operation,
        path: str,
        target: str | None = None,
    ) -> OperationResult:
        """Build a successful result."""
        return cls(operation=operation, path=path, success=True, target=target)

    @classmethod
    def failed(
        cls,
        operation: Operation,
        path: str,
        kind: FailureKind,
        message: str = "",
        target: str | None = None,
    ) -> OperationResult:
        """Build a failed result."""
        return cls(
            operation=operation,
            path=path,
            success=False,
            kind=kind,
            message=message,
            target=target,
        )

    def to_dict(self) -> dict[str, str | bool | None]:
        """Flatten the result for structured logging."""
        return {
            "operation": self.operation.metric_name,
            "path": self.path,
            "target": self.target,
            "success": self.success,
            "kind": self.kind.value if self.kind else None,
            "message": self.message,
        }
