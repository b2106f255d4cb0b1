from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager

from django.conf import settings
from django.db import DatabaseError, IntegrityError, OperationalError, connection, transaction

from core.models import MawbInfo
from mawb_engine.errors import (
    ConstraintViolation,
    DocumentEngineError,
    InvalidInput,
    NotFound,
    TransactionFailure,
    TransactionTimeout,
)

logger = logging.getLogger(__name__)

PG_QUERY_CANCELED = "57014"
PG_LOCK_NOT_AVAILABLE = "55P03"


def parse_uuid(value, field: str = "mawb_info_uuid") -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if value is None or not str(value).strip():
        raise InvalidInput("is required", field=field)
    try:
        return uuid.UUID(str(value).strip())
    except ValueError:
        raise InvalidInput(f"not a valid uuid: {value!r}", field=field)


def _apply_statement_timeout() -> None:
    # SET LOCAL only lives until the end of the surrounding transaction.
    if connection.vendor != "postgresql":
        return
    timeout_ms = int(settings.DOCUMENT_TRANSACTION_TIMEOUT_SECONDS * 1000)
    with connection.cursor() as cur:
        cur.execute("SET LOCAL statement_timeout = %s", [timeout_ms])
        cur.execute("SET LOCAL lock_timeout = %s", [timeout_ms])


def _is_timeout(exc: BaseException) -> bool:
    return getattr(exc.__cause__, "pgcode", None) in (PG_QUERY_CANCELED, PG_LOCK_NOT_AVAILABLE)


@contextmanager
def document_transaction(operation: str):
    """
    Run the body in one database transaction and translate store errors.

    Anything raised inside rolls the whole transaction back. Engine errors pass
    through untouched; database errors are re-raised as ConstraintViolation,
    TransactionTimeout or TransactionFailure with the original chained.
    """
    try:
        with transaction.atomic():
            _apply_statement_timeout()
            yield
    except DocumentEngineError:
        raise
    except IntegrityError as exc:
        logger.warning("%s rolled back on constraint violation: %s", operation, exc)
        raise ConstraintViolation(str(exc)) from exc
    except OperationalError as exc:
        if _is_timeout(exc):
            logger.warning("%s timed out after %ss", operation, settings.DOCUMENT_TRANSACTION_TIMEOUT_SECONDS)
            raise TransactionTimeout(f"{operation} timed out", original=exc) from exc
        logger.exception("%s rolled back", operation)
        raise TransactionFailure(f"{operation} failed: {exc}", original=exc) from exc
    except DatabaseError as exc:
        logger.exception("%s rolled back", operation)
        raise TransactionFailure(f"{operation} failed: {exc}", original=exc) from exc


def lock_mawb_info(mawb_info_uuid: uuid.UUID) -> MawbInfo:
    """
    Fetch the owning MAWB info row with a row lock held until commit.

    Every write to a MAWB's documents takes this lock first, so two first-time
    upserts for the same MAWB run one after the other instead of both inserting.
    """
    mawb_info = MawbInfo.objects.select_for_update().filter(pk=mawb_info_uuid).first()
    if mawb_info is None:
        raise NotFound("mawb info", mawb_info_uuid)
    return mawb_info
