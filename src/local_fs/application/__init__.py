"""Application layer for the local filesystem layer.

Exports:
    - FilesystemAdapter: Boolean-result facade over a FileSystemPort
    - get_default_adapter / reset_default_adapter: Shared process-wide adapter
    - read_binary ... hard_link: Module-level functions on the shared adapter
"""

from local_fs.application.filesystem_adapter import (
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

__all__ = [
    "FilesystemAdapter",
    "get_default_adapter",
    "reset_default_adapter",
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
