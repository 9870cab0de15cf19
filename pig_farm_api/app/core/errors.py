"""
Error types raised by the record service and the record store.

``RecordValidationError`` is a client mistake (HTTP 400);
``StorageFault`` is an unexpected failure of the underlying store
(HTTP 500).  Both are terminal for the request that triggered them
and are never retried.
"""

from typing import Any, Dict, List, Optional


class RecordValidationError(ValueError):
    """A payload does not match the field schema of a resource."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class StorageFault(RuntimeError):
    """Reading from or writing to the record store failed."""
