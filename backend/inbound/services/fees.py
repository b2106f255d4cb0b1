"""
Per-HAWB split of inbound fees.

Most inbound fees are charged per customs declaration, and one declaration
covers at most N house waybills. The total (declarations x fee) is spread over
the waybills in whole cents: everyone gets the per-unit amount rounded down,
and the cents left over go one each to the first waybills in input order, so
the shares always add back up to the total exactly.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from django.conf import settings

from core.money import ONE_CENT, d, floor_cents, q2
from mawb_engine.errors import InvalidInput

from ..dataclasses import FeeAllocation

logger = logging.getLogger(__name__)


def _units(total_units) -> int:
    if isinstance(total_units, bool) or not isinstance(total_units, int):
        raise InvalidInput(f"expected a whole number, got {total_units!r}", field="total_units")
    if total_units <= 0:
        raise InvalidInput(f"must be greater than zero, got {total_units}", field="total_units")
    return total_units


def _fee(value, field: str) -> Decimal:
    fee = d(value, field=field)
    if fee < 0:
        raise InvalidInput(f"must not be negative, got {fee}", field=field)
    if fee != floor_cents(fee, field=field):
        raise InvalidInput(f"must be a whole number of cents, got {fee}", field=field)
    return fee


def _split(total_fee: Decimal, total_units: int) -> Tuple[Decimal, List[Decimal]]:
    floor = floor_cents(total_fee / total_units)
    leftover_cents = int((total_fee - floor * total_units) / ONE_CENT)
    return floor, [floor + ONE_CENT if i < leftover_cents else floor for i in range(total_units)]


def allocate_batched_fee(total_units, fee_per_declaration, max_units_per_declaration) -> FeeAllocation:
    """
    Split a per-declaration fee over ``total_units`` waybills.

    45 waybills at 200 per 40 waybills: 2 declarations, 400.00 in total,
    8.88 floor, the first 40 waybills pay 8.89 and the last 5 pay 8.88.
    """
    units = _units(total_units)
    fee = _fee(fee_per_declaration, "fee_per_declaration")
    if isinstance(max_units_per_declaration, bool) or not isinstance(max_units_per_declaration, int):
        raise InvalidInput(
            f"expected a whole number, got {max_units_per_declaration!r}", field="max_units_per_declaration",
        )
    if max_units_per_declaration <= 0:
        raise InvalidInput(
            f"must be greater than zero, got {max_units_per_declaration}", field="max_units_per_declaration",
        )

    declarations = -(-units // max_units_per_declaration)
    total_fee = q2(fee * declarations)
    floor, per_unit_fees = _split(total_fee, units)
    return FeeAllocation(
        declarations=declarations,
        total_fee=total_fee,
        floor_per_unit=floor,
        per_unit_fees=per_unit_fees,
    )


def allocate_flat_fee(total_units, total_fee) -> FeeAllocation:
    """Split one fixed amount (charged once per MAWB) over ``total_units`` waybills."""
    units = _units(total_units)
    fee = q2(_fee(total_fee, "total_fee"))
    floor, per_unit_fees = _split(fee, units)
    return FeeAllocation(
        declarations=None,
        total_fee=fee,
        floor_per_unit=floor,
        per_unit_fees=per_unit_fees,
    )


def fee_schedule() -> Mapping[str, Dict[str, Any]]:
    return settings.INBOUND_FEE_SCHEDULE


def overtime_fee_names(schedule: Optional[Mapping[str, Dict[str, Any]]] = None) -> List[str]:
    schedule = fee_schedule() if schedule is None else schedule
    return [name for name, rule in schedule.items() if rule.get("overtime")]


def allocate_rule(name: str, rule: Mapping[str, Any], total_units: int) -> FeeAllocation:
    kind = rule.get("kind")
    if kind == "batched":
        return allocate_batched_fee(total_units, rule["fee_per_declaration"], rule["max_per_declaration"])
    if kind == "flat":
        return allocate_flat_fee(total_units, rule["total_fee"])
    raise InvalidInput(f"unknown fee kind {kind!r}", field=name)


def compute_fee_schedule(
    hawb_nos: Sequence[str],
    enable_ot: bool,
    schedule: Optional[Mapping[str, Dict[str, Any]]] = None,
) -> Dict[str, FeeAllocation]:
    """
    Run every configured fee over the given waybills.

    Overtime fees come back empty unless ``enable_ot`` is set, and so does
    every fee when there are no waybills at all.
    """
    schedule = fee_schedule() if schedule is None else schedule
    allocations: Dict[str, FeeAllocation] = {}
    for name, rule in schedule.items():
        if not hawb_nos or (rule.get("overtime") and not enable_ot):
            allocations[name] = FeeAllocation.empty()
            continue
        allocations[name] = allocate_rule(name, rule, len(hawb_nos))

    logger.debug(
        "Fee schedule for %d waybills (overtime=%s): %s",
        len(hawb_nos), enable_ot, {name: str(a.total_fee) for name, a in allocations.items()},
    )
    return allocations


def fee_shares(allocations: Mapping[str, FeeAllocation], hawb_nos: Iterable[str]) -> Dict[str, Dict[str, Decimal]]:
    """Per-waybill shares of every non-empty allocation, keyed by fee name then HAWB number."""
    hawb_nos = list(hawb_nos)
    return {
        name: allocation.shares_by_key(hawb_nos)
        for name, allocation in allocations.items()
        if allocation.per_unit_fees
    }
