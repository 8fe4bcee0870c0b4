"""Outbound ports - interfaces for external dependencies.

The only external system the layer depends on is the local filesystem
itself.
"""

from local_fs.ports.outbound.filesystem import (
    DecodeError,
    FileSystemError,
    FileSystemPort,
    NotFoundError,
    PathLike,
    PermissionDeniedError,
    error_for,
)

__all__ = [
    "FileSystemPort",
    "PathLike",
    "FileSystemError",
    "NotFoundError",
    "PermissionDeniedError",
    "DecodeError",
    "error_for",
]
