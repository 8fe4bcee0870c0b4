"""
Local FS - Thin Synchronous Local-Disk Operation Layer

Thirteen path-based filesystem primitives (read, write, directory
creation and removal, copy, rename, linking) with uniform results and
failure classification across operating systems.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"

from local_fs.adapters import LocalFileSystem
from local_fs.application import (
    FilesystemAdapter,
    copy,
    create_dir,
    create_dir_recursive,
    get_default_adapter,
    hard_link,
    read_binary,
    read_dir,
    read_string,
    remove_dir,
    remove_dir_recursive,
    remove_file,
    rename,
    reset_default_adapter,
    soft_link,
    write,
)
from local_fs.domain.entities import Operation, OperationResult
from local_fs.domain.value_objects import FailureKind
from local_fs.ports import (
    DecodeError,
    FileSystemError,
    FileSystemPort,
    NotFoundError,
    PermissionDeniedError,
)

__all__ = [
    "__version__",
    "FilesystemAdapter",
    "get_default_adapter",
    "reset_default_adapter",
    "LocalFileSystem",
    "FileSystemPort",
    "Operation",
    "OperationResult",
    "FailureKind",
    "FileSystemError",
    "NotFoundError",
    "PermissionDeniedError",
    "DecodeError",
    "read_binary",
    "read_string",
    "read_dir",
    "write",
    "create_dir",
    "create_dir_recursive",
    "remove_file",
    "remove_dir",
    "remove_dir_recursive",
    "copy",
    "rename",
    "soft_link",
    "hard_link",
]
