"""
Error types shared by the fee, weight and document services.

The HTTP layer maps these onto responses in ``mawb_engine.exception_handler``;
services only ever raise them, they never build responses themselves.
"""
from __future__ import annotations

from typing import Any, Optional


class DocumentEngineError(Exception):
    """Base exception for all document engine errors"""
    code = "error"


class InvalidInput(DocumentEngineError):
    """Raised when an input value is missing, non-numeric or out of range"""
    code = "invalid_input"

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class NotFound(DocumentEngineError):
    """Raised when the owning MAWB info or the requested document does not exist"""
    code = "not_found"

    def __init__(self, resource: str, key: Any):
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} not found: {key}")


class ConstraintViolation(DocumentEngineError):
    """Raised when the store rejects a write on a foreign-key or uniqueness constraint"""
    code = "constraint_violation"


class TransactionFailure(DocumentEngineError):
    """Raised when a transaction was rolled back; ``original`` is the store's error"""
    code = "transaction_failure"

    def __init__(self, message: str, original: Optional[BaseException] = None):
        self.original = original
        super().__init__(message)


class TransactionTimeout(TransactionFailure):
    """Raised when the store cancelled a statement after the configured timeout"""
    code = "transaction_timeout"


class InvalidStatusTransition(DocumentEngineError):
    """Raised when a status change is not allowed from the document's current status"""
    code = "invalid_status_transition"

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"cannot move document from {current} to {target}")
