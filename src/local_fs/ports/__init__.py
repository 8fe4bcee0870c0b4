"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts. Adapters
implement these ports with concrete functionality.
"""

from local_fs.ports.outbound import (
    DecodeError,
    FileSystemError,
    FileSystemPort,
    NotFoundError,
    PathLike,
    PermissionDeniedError,
)

__all__ = [
    "FileSystemPort",
    "PathLike",
    "FileSystemError",
    "NotFoundError",
    "PermissionDeniedError",
    "DecodeError",
]
