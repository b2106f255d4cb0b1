from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errors import (
    ConstraintViolation,
    DocumentEngineError,
    InvalidInput,
    InvalidStatusTransition,
    NotFound,
    TransactionFailure,
    TransactionTimeout,
)

logger = logging.getLogger(__name__)

# Most specific first: TransactionTimeout is a TransactionFailure.
STATUS_BY_ERROR = [
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (ConstraintViolation, status.HTTP_409_CONFLICT),
    (InvalidStatusTransition, status.HTTP_409_CONFLICT),
    (TransactionTimeout, status.HTTP_504_GATEWAY_TIMEOUT),
    (TransactionFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def document_exception_handler(exc, context):
    """DRF exception handler that knows about the engine's typed errors."""
    if not isinstance(exc, DocumentEngineError):
        return exception_handler(exc, context)

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    for err_cls, mapped in STATUS_BY_ERROR:
        if isinstance(exc, err_cls):
            http_status = mapped
            break

    if http_status >= 500:
        logger.error("Request failed with %s: %s", exc.code, exc)

    return Response({"detail": str(exc), "code": exc.code}, status=http_status)
