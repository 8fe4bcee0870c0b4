"""Failure classification for filesystem operations.

Every failed operation is reduced to exactly one FailureKind. The kind is
derived from the OSError subclass Python raises when one exists, and from
the raw errno otherwise, so the same failure is reported identically on
Linux, macOS and Windows.
"""

from __future__ import annotations

import errno
import shutil
from enum import Enum


class FailureKind(Enum):
    """Reasons a filesystem operation can fail."""

    NOT_FOUND = "not_found"
    """The path (or a parent component) does not exist."""

    PERMISSION_DENIED = "permission_denied"
    """The process lacks the rights for the requested access."""

    ALREADY_EXISTS = "already_exists"
    """The target path is already occupied."""

    NOT_A_DIRECTORY = "not_a_directory"
    """A directory was expected but something else was found."""

    IS_A_DIRECTORY = "is_a_directory"
    """A non-directory was expected but a directory was found."""

    DIRECTORY_NOT_EMPTY = "directory_not_empty"
    """The directory still has entries."""

    CROSS_DEVICE = "cross_device"
    """The operation would span two filesystems."""

    INVALID_ARGUMENT = "invalid_argument"
    """The path or argument combination is not acceptable."""

    DECODE_ERROR = "decode_error"
    """File contents are not valid UTF-8."""

    READ_ONLY_FILESYSTEM = "read_only_filesystem"
    """The filesystem is mounted read-only."""

    STORAGE_FULL = "storage_full"
    """No space (or quota) left on the device."""

    UNSUPPORTED = "unsupported"
    """The platform or filesystem does not support the operation."""

    OTHER = "other"
    """Any failure not covered above."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> FailureKind:
        """Classify an exception raised by an OS-level call.

        Args:
            exc: The exception to classify.

        Returns:
            The matching FailureKind, OTHER when nothing matches.
        """
        if isinstance(exc, UnicodeDecodeError):
            return cls.DECODE_ERROR
        if isinstance(exc, shutil.SameFileError):
            return cls.INVALID_ARGUMENT
        if isinstance(exc, NotImplementedError):
            return cls.UNSUPPORTED
        if isinstance(exc, ValueError):
            # Embedded NUL bytes and similar malformed paths
            return cls.INVALID_ARGUMENT

        if not isinstance(exc, OSError):
            return cls.OTHER

        for exc_type, kind in _EXCEPTION_KINDS:
            if isinstance(exc, exc_type):
                return kind

        return _ERRNO_KINDS.get(exc.errno, cls.OTHER)


_EXCEPTION_KINDS: tuple[tuple[type[OSError], FailureKind], ...] = (
    (FileNotFoundError, FailureKind.NOT_FOUND),
    (PermissionError, FailureKind.PERMISSION_DENIED),
    (FileExistsError, FailureKind.ALREADY_EXISTS),
    (NotADirectoryError, FailureKind.NOT_A_DIRECTORY),
    (IsADirectoryError, FailureKind.IS_A_DIRECTORY),
)

_ERRNO_KINDS: dict[int | None, FailureKind] = {
    errno.ENOENT: FailureKind.NOT_FOUND,
    errno.EACCES: FailureKind.PERMISSION_DENIED,
    errno.EPERM: FailureKind.PERMISSION_DENIED,
    errno.EEXIST: FailureKind.ALREADY_EXISTS,
    errno.ENOTDIR: FailureKind.NOT_A_DIRECTORY,
    errno.EISDIR: FailureKind.IS_A_DIRECTORY,
    errno.ENOTEMPTY: FailureKind.DIRECTORY_NOT_EMPTY,
    errno.EXDEV: FailureKind.CROSS_DEVICE,
    errno.EINVAL: FailureKind.INVALID_ARGUMENT,
    errno.ENAMETOOLONG: FailureKind.INVALID_ARGUMENT,
    errno.ELOOP: FailureKind.INVALID_ARGUMENT,
    errno.EROFS: FailureKind.READ_ONLY_FILESYSTEM,
    errno.ENOSPC: FailureKind.STORAGE_FULL,
    errno.EDQUOT: FailureKind.STORAGE_FULL,
    errno.ENOSYS: FailureKind.UNSUPPORTED,
    errno.EOPNOTSUPP: FailureKind.UNSUPPORTED,
}
