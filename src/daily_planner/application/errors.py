"""Application-level error types shared by services and adapters."""

from __future__ import annotations


class StoreError(RuntimeError):
    """Raised when the backing store fails (connectivity, constraint or data errors)."""

    def __init__(self, *, operation: str) -> None:
        super().__init__(f"store operation failed: {operation}")
        self.operation = operation
