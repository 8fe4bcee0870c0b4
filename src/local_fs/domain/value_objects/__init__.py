"""Value objects for the local filesystem domain.

Exports:
    - FailureKind: Why a filesystem operation failed
"""

from local_fs.domain.value_objects.failure_kind import FailureKind

__all__ = [
    "FailureKind",
]
