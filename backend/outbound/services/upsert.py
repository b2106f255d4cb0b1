"""
Create-or-replace persistence for the outbound documents of a MAWB.

A document (cargo manifest or draft MAWB) is written as one unit: its header
row plus every child row. The first call for a MAWB inserts a new header in
Draft status; every later call updates the header in place, deletes all of its
children and inserts the supplied children again. Children are never patched.

Both paths run inside ``document_transaction`` with the owning MAWB info row
locked, so a failure at any step leaves the previous document untouched and
concurrent writers for the same MAWB are serialized.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Set, Tuple, Type

from django.db import models

from core.transactions import document_transaction, lock_mawb_info, parse_uuid
from mawb_engine.errors import InvalidInput, NotFound

from ..dataclasses import DocumentPayload
from ..models import (
    CargoManifest,
    CargoManifestItem,
    DocumentStatus,
    DraftMAWB,
    DraftMAWBCharge,
    DraftMAWBItem,
    DraftMAWBItemDim,
)
from .totals import calculate_draft

logger = logging.getLogger(__name__)

# Columns the engine owns; callers cannot set them through a payload.
MANAGED_FIELDS = {"uuid", "id", "mawb_info", "status", "created_at", "updated_at", "position"}

CARGO_MANIFEST_ITEM_FIELDS = (
    "hawb_no", "pkgs", "gross_weight", "destination", "commodity",
    "shipper_name_address", "consignee_name_address",
)
DRAFT_ITEM_FIELDS = (
    "pieces_rcp", "gross_weight", "kg_lb", "rate_class", "total_volume",
    "chargeable_weight", "rate_charge", "total", "nature_and_quantity",
)
DIM_FIELDS = ("length", "width", "height", "count")
CHARGE_FIELDS = ("key", "value")


def _writable_header_fields(model: Type[models.Model]) -> Set[str]:
    return {
        f.name for f in model._meta.concrete_fields
        if f.name not in MANAGED_FIELDS
    }


def _pick(data: Dict[str, Any], names: Iterable[str]) -> Dict[str, Any]:
    return {name: data[name] for name in names if name in data}


def _save_header(model: Type[models.Model], mawb_info, header: Dict[str, Any]) -> Tuple[models.Model, bool]:
    allowed = _writable_header_fields(model)
    unknown = sorted(set(header) - allowed)
    if unknown:
        raise InvalidInput(f"unknown header fields {unknown}")

    document = model.objects.filter(mawb_info=mawb_info).first()
    created = document is None
    if created:
        document = model(mawb_info=mawb_info)
    for name, value in header.items():
        setattr(document, name, value)
    # A replaced document always goes back to Draft and needs confirming again.
    document.status = DocumentStatus.DRAFT
    document.save()
    return document, created


# ---------- Cargo manifest ----------

def delete_cargo_manifest_children(manifest: CargoManifest) -> int:
    deleted, _ = CargoManifestItem.objects.filter(cargo_manifest=manifest).delete()
    return deleted


def get_cargo_manifest(mawb_info_uuid) -> CargoManifest:
    key = parse_uuid(mawb_info_uuid)
    manifest = (CargoManifest.objects
                .prefetch_related("items")
                .filter(mawb_info_id=key)
                .first())
    if manifest is None:
        raise NotFound("cargo manifest", key)
    return manifest


def upsert_cargo_manifest(mawb_info_uuid, payload: DocumentPayload) -> CargoManifest:
    key = parse_uuid(mawb_info_uuid)

    with document_transaction("cargo manifest upsert"):
        mawb_info = lock_mawb_info(key)
        manifest, created = _save_header(CargoManifest, mawb_info, payload.header)
        removed = 0 if created else delete_cargo_manifest_children(manifest)

        CargoManifestItem.objects.bulk_create([
            CargoManifestItem(cargo_manifest=manifest, position=pos, **_pick(item, CARGO_MANIFEST_ITEM_FIELDS))
            for pos, item in enumerate(payload.items)
        ])

    logger.info(
        "%s cargo manifest %s for mawb info %s (%d items, %d old rows removed)",
        "Created" if created else "Replaced", manifest.uuid, key, len(payload.items), removed,
    )
    return get_cargo_manifest(key)


# ---------- Draft MAWB ----------

def delete_draft_mawb_children(draft: DraftMAWB) -> int:
    """Delete dims, items and charges of a draft; returns the number of rows removed."""
    dims, _ = DraftMAWBItemDim.objects.filter(item__draft_mawb=draft).delete()
    items, _ = DraftMAWBItem.objects.filter(draft_mawb=draft).delete()
    charges, _ = DraftMAWBCharge.objects.filter(draft_mawb=draft).delete()
    return dims + items + charges


def get_draft_mawb(mawb_info_uuid) -> DraftMAWB:
    key = parse_uuid(mawb_info_uuid)
    draft = (DraftMAWB.objects
             .prefetch_related("items", "items__dims", "charges")
             .filter(mawb_info_id=key)
             .first())
    if draft is None:
        raise NotFound("draft mawb", key)
    return draft


def upsert_draft_mawb(mawb_info_uuid, payload: DocumentPayload) -> DraftMAWB:
    key = parse_uuid(mawb_info_uuid)
    # Weights and totals are derived before anything touches the database.
    calculate_draft(payload)

    with document_transaction("draft mawb upsert"):
        mawb_info = lock_mawb_info(key)
        draft, created = _save_header(DraftMAWB, mawb_info, payload.header)
        removed = 0 if created else delete_draft_mawb_children(draft)

        dims = []
        for pos, item in enumerate(payload.items):
            row = DraftMAWBItem.objects.create(draft_mawb=draft, position=pos, **_pick(item, DRAFT_ITEM_FIELDS))
            for dim_pos, dim in enumerate(item.get("dims") or []):
                dims.append(DraftMAWBItemDim(item=row, position=dim_pos, **_pick(dim, DIM_FIELDS)))
        DraftMAWBItemDim.objects.bulk_create(dims)

        DraftMAWBCharge.objects.bulk_create([
            DraftMAWBCharge(draft_mawb=draft, position=pos, **_pick(charge, CHARGE_FIELDS))
            for pos, charge in enumerate(payload.charges or [])
        ])

    logger.info(
        "%s draft mawb %s for mawb info %s (%d items, %d dims, %d charges, %d old rows removed)",
        "Created" if created else "Replaced", draft.uuid, key,
        len(payload.items), len(dims), len(payload.charges or []), removed,
    )
    return get_draft_mawb(key)
