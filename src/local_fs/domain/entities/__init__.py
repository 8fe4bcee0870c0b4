"""Domain entities for the local filesystem layer.

Exports:
    - Operation: The thirteen supported filesystem operations
    - OperationResult: Outcome of a mutating operation
"""

from local_fs.domain.entities.operation_result import Operation, OperationResult

__all__ = [
    "Operation",
    "OperationResult",
]
