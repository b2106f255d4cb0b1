from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Mapping, Union

from core.money import ZERO, d, q2, q3
from mawb_engine.errors import InvalidInput

from ..dataclasses import ChargeableWeightResult, DimensionEntry

# kg per m3, i.e. the usual 6000 cm3/kg air-freight divisor
VOLUMETRIC_FACTOR_KG_PER_M3 = Decimal("166.67")
LB_TO_KG = Decimal("0.453592")
WEIGHT_UNITS = ("kg", "lb")

DimLike = Union[DimensionEntry, Mapping]


def to_dimension_entry(raw: DimLike) -> DimensionEntry:
    if isinstance(raw, DimensionEntry):
        return raw
    return DimensionEntry(
        length=d(raw.get("length"), field="length"),
        width=d(raw.get("width"), field="width"),
        height=d(raw.get("height"), field="height"),
        count=d(raw.get("count"), field="count"),
    )


def total_volume_m3(dims: Iterable[DimensionEntry]) -> Decimal:
    """Sum L x W x H (cm) x count as m3; entries with any non-positive field are skipped."""
    return sum((dim.volume_m3() for dim in dims), ZERO)


def gross_weight_kg(gross_weight, weight_unit: str = "kg") -> Decimal:
    unit = (weight_unit or "kg").strip().lower()
    if unit not in WEIGHT_UNITS:
        raise InvalidInput(f"unknown weight unit {weight_unit!r}", field="kg_lb")
    weight = d(gross_weight, field="gross_weight")
    if unit == "lb":
        weight = weight * LB_TO_KG
    return weight


def calculate_chargeable_weight(dims: Iterable[DimLike], gross_weight, weight_unit: str = "kg") -> ChargeableWeightResult:
    """
    Chargeable weight is the greater of the gross weight (in kg) and the
    volumetric weight of all measurable dimension entries.

    Volume is reported to 3 places and chargeable weight to 2 places; the
    volumetric weight itself is derived from the unrounded volume.

    The greater weight is picked before rounding, then rounded half up. A
    gross weight with more than 2 decimals can therefore come back slightly
    below itself (12.344 kg gives 12.34), but never below the gross weight
    rounded to 2 places.
    """
    entries: List[DimensionEntry] = [to_dimension_entry(dim) for dim in dims]
    weight_kg = gross_weight_kg(gross_weight, weight_unit)

    volume = total_volume_m3(entries)
    volumetric_kg = volume * VOLUMETRIC_FACTOR_KG_PER_M3

    return ChargeableWeightResult(
        total_volume_m3=q3(volume),
        chargeable_weight_kg=q2(max(weight_kg, volumetric_kg)),
    )
