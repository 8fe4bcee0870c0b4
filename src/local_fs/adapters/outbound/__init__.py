"""Outbound adapters - implementations of outbound ports."""

from local_fs.adapters.outbound.local_filesystem import LocalFileSystem

__all__ = [
    "LocalFileSystem",
]
