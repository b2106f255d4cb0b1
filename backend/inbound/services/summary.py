from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Optional

from core.money import ZERO, d_or_zero, q2
from core.transactions import parse_uuid
from mawb_engine.errors import InvalidInput, NotFound

from ..dataclasses import CategorySummary, UploadSummary, WaybillRecord, WaybillSummary
from ..models import PreImportManifest
from .fees import compute_fee_schedule, fee_shares, overtime_fee_names

logger = logging.getLogger(__name__)

VAT_ONLY_CATEGORY = "2"
DUTY_AND_VAT_CATEGORY = "3"
OTHER_CATEGORY = "other"


def _bucket_for(buckets: Dict[str, CategorySummary], category: str) -> CategorySummary:
    code = (category or "").strip()
    return buckets.get(code, buckets[OTHER_CATEGORY])


def summarize_waybills(
    records: Iterable[WaybillRecord],
    shares: Mapping[str, Mapping[str, Decimal]],
    overtime_enabled: bool,
    overtime_fees: Optional[Iterable[str]] = None,
) -> WaybillSummary:
    """
    Group waybills into customs categories "2", "3" and other.

    ``shares`` maps a fee name to the per-waybill share of that fee, keyed by
    HAWB number. Every waybill must have a share in every fee that is summed;
    overtime fees are only summed when ``overtime_enabled`` is set.
    Category "2" waybills only carry VAT, so their duty columns stay at zero.
    """
    overtime = set(overtime_fee_names() if overtime_fees is None else overtime_fees)
    summed = [name for name in shares if overtime_enabled or name not in overtime]

    buckets = {
        code: CategorySummary(category=code, fees={name: ZERO for name in shares})
        for code in (VAT_ONLY_CATEGORY, DUTY_AND_VAT_CATEGORY, OTHER_CATEGORY)
    }

    for record in records:
        bucket = _bucket_for(buckets, record.category)
        vat = d_or_zero(record.vat, field="vat")
        bucket.total += 1
        bucket.vat += vat
        if bucket.category != VAT_ONLY_CATEGORY:
            duty = d_or_zero(record.duty, field="duty")
            bucket.duty += duty
            bucket.duty_plus_vat += duty + vat

        for name in summed:
            share = shares[name].get(record.hawb_no)
            if share is None:
                raise InvalidInput(f"no {name} share for waybill {record.hawb_no!r}", field="fee_shares")
            bucket.fees[name] += share

    for bucket in buckets.values():
        bucket.vat = q2(bucket.vat)
        bucket.duty = q2(bucket.duty)
        bucket.duty_plus_vat = q2(bucket.duty_plus_vat)
        bucket.fees = {name: q2(amount) for name, amount in bucket.fees.items()}

    cat2 = buckets[VAT_ONLY_CATEGORY]
    cat3 = buckets[DUTY_AND_VAT_CATEGORY]
    other = buckets[OTHER_CATEGORY]
    return WaybillSummary(
        category_2=cat2,
        category_3=cat3,
        other=other,
        total_tax=q2(cat2.vat + cat3.duty_plus_vat),
        total_waybills=cat2.total + cat3.total + other.total,
    )


def build_manifest_summary(header_uuid) -> UploadSummary:
    """Load a pre-import manifest and work out its fees and category totals."""
    key = parse_uuid(header_uuid, field="header_uuid")
    header = PreImportManifest.objects.prefetch_related("details").filter(pk=key).first()
    if header is None:
        raise NotFound("pre-import manifest", key)

    records = [
        WaybillRecord(hawb_no=row.hawb_no, category=row.category, vat=row.vat, duty=row.duty)
        for row in header.details.all()
    ]
    hawb_nos = [r.hawb_no for r in records]

    allocations = compute_fee_schedule(hawb_nos, header.is_enable_customs_ot)
    waybills = summarize_waybills(
        records,
        fee_shares(allocations, hawb_nos),
        header.is_enable_customs_ot,
    )
    logger.info(
        "Summary for manifest %s (%s): %d waybills, total tax %s",
        header.uuid, header.mawb, waybills.total_waybills, waybills.total_tax,
    )
    return UploadSummary(
        header_uuid=header.uuid,
        mawb=header.mawb,
        overtime_enabled=header.is_enable_customs_ot,
        allocations=allocations,
        waybills=waybills,
    )
