from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Type

from django.db import models

from core.transactions import document_transaction, lock_mawb_info, parse_uuid
from mawb_engine.errors import InvalidStatusTransition, NotFound

from ..models import CargoManifest, DocumentStatus, DraftMAWB

logger = logging.getLogger(__name__)

DRAFT = DocumentStatus.DRAFT.value
PENDING = DocumentStatus.PENDING.value
CONFIRMED = DocumentStatus.CONFIRMED.value
REJECTED = DocumentStatus.REJECTED.value

# Allowed status moves, keyed by stored value. Confirmed and Rejected are
# terminal; a document only leaves them when it is replaced through an upsert,
# which resets it to Draft.
TRANSITIONS: Dict[str, FrozenSet[str]] = {
    DRAFT: frozenset({PENDING, CONFIRMED, REJECTED}),
    PENDING: frozenset({CONFIRMED, REJECTED}),
    CONFIRMED: frozenset(),
    REJECTED: frozenset(),
}

DOCUMENT_NAMES = {
    CargoManifest: "cargo manifest",
    DraftMAWB: "draft mawb",
}


def can_transition(current: str, target: str) -> bool:
    return str(target) in TRANSITIONS.get(str(current), frozenset())


def transition(model: Type[models.Model], mawb_info_uuid, target: str):
    """Move the document of ``model`` owned by the given MAWB info to ``target``."""
    key = parse_uuid(mawb_info_uuid)
    name = DOCUMENT_NAMES[model]

    with document_transaction(f"{name} status change"):
        lock_mawb_info(key)
        document = model.objects.select_for_update().filter(mawb_info_id=key).first()
        if document is None:
            raise NotFound(name, key)

        current = str(document.status)
        if not can_transition(current, target):
            raise InvalidStatusTransition(current, str(target))

        document.status = str(target)
        document.save(update_fields=["status", "updated_at"])

    logger.info("%s %s moved %s -> %s", name, document.uuid, current, target)
    return document


def confirm_cargo_manifest(mawb_info_uuid) -> CargoManifest:
    return transition(CargoManifest, mawb_info_uuid, CONFIRMED)


def reject_cargo_manifest(mawb_info_uuid) -> CargoManifest:
    return transition(CargoManifest, mawb_info_uuid, REJECTED)


def confirm_draft_mawb(mawb_info_uuid) -> DraftMAWB:
    return transition(DraftMAWB, mawb_info_uuid, CONFIRMED)


def reject_draft_mawb(mawb_info_uuid) -> DraftMAWB:
    return transition(DraftMAWB, mawb_info_uuid, REJECTED)
