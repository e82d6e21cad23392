"""Infrastructure exceptions for persistence operations.

Store errors extend WorkforceException so a presentation layer can map
them to responses consistently. They are never retried or swallowed.
"""

from workforce.domain.exceptions import WorkforceException


class StoreException(WorkforceException):
    """Persistence collaborator failed (unexpected; always fatal to the operation)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Task store failed during {operation}: {reason}",
            "STORE_FAILURE",
            {"operation": operation, "reason": reason},
        )
