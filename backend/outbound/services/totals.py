from __future__ import annotations

from typing import Any, Dict, List

from core.money import ZERO, d_or_zero, q2

from ..dataclasses import DocumentPayload
from .weights import calculate_chargeable_weight

HEADER_PREPAID_FIELDS = (
    "prepaid",
    "valuation_charge",
    "tax",
    "total_other_charges_due_agent",
)


def calculate_item(item: Dict[str, Any]) -> None:
    """Fill total_volume, chargeable_weight and total on one draft item in place."""
    result = calculate_chargeable_weight(
        item.get("dims") or [],
        d_or_zero(item.get("gross_weight"), field="gross_weight"),
        item.get("kg_lb") or "kg",
    )
    item["total_volume"] = result.total_volume_m3
    item["chargeable_weight"] = result.chargeable_weight_kg
    rate_charge = d_or_zero(item.get("rate_charge"), field="rate_charge")
    item["total"] = q2(rate_charge * result.chargeable_weight_kg)


def calculate_draft(payload: DocumentPayload) -> DocumentPayload:
    """
    Compute per-item weights/totals and the header totals of a draft MAWB.

    total_other_charges_due_carrier = sum(item totals) + sum(charge values)
    total_prepaid = prepaid + valuation_charge + tax
                    + total_other_charges_due_agent + total_other_charges_due_carrier
    """
    items: List[Dict[str, Any]] = payload.items
    for item in items:
        calculate_item(item)

    item_total = sum((item["total"] for item in items), ZERO)
    charges_total = sum(
        (d_or_zero(ch.get("value"), field="charges.value") for ch in (payload.charges or [])),
        ZERO,
    )

    header = payload.header
    header["total_other_charges_due_carrier"] = q2(item_total + charges_total)
    header["total_prepaid"] = q2(
        sum((d_or_zero(header.get(name), field=name) for name in HEADER_PREPAID_FIELDS), ZERO)
        + header["total_other_charges_due_carrier"]
    )
    return payload
