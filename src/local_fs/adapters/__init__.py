"""Adapters layer - concrete implementations of port interfaces.

Outbound adapters implement external dependencies; here that is the
local disk.
"""

from local_fs.adapters.outbound import LocalFileSystem

__all__ = [
    "LocalFileSystem",
]
