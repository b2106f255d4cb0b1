from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from core.money import ZERO
from mawb_engine.errors import InvalidInput


@dataclass
class FeeAllocation:
    declarations: Optional[int]
    total_fee: Decimal
    floor_per_unit: Decimal
    per_unit_fees: List[Decimal] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "FeeAllocation":
        return cls(declarations=0, total_fee=Decimal("0.00"), floor_per_unit=Decimal("0.00"))

    def shares_by_key(self, keys: Iterable[str]) -> Dict[str, Decimal]:
        """
        Pair each per-unit fee with the waybill it was computed for.

        ``keys`` must be given in the same order the allocation was made for,
        one key per unit and no key twice.
        """
        keys = list(keys)
        if len(keys) != len(self.per_unit_fees):
            raise InvalidInput(
                f"{len(keys)} keys given for {len(self.per_unit_fees)} fee shares", field="keys",
            )
        shares = dict(zip(keys, self.per_unit_fees))
        if len(shares) != len(keys):
            raise InvalidInput("duplicate keys", field="keys")
        return shares


@dataclass
class WaybillRecord:
    hawb_no: str
    category: str
    vat: Decimal = ZERO
    duty: Decimal = ZERO


@dataclass
class CategorySummary:
    category: str
    total: int = 0
    vat: Decimal = ZERO
    duty: Decimal = ZERO
    duty_plus_vat: Decimal = ZERO
    fees: Dict[str, Decimal] = field(default_factory=dict)


@dataclass
class WaybillSummary:
    category_2: CategorySummary
    category_3: CategorySummary
    other: CategorySummary
    total_tax: Decimal
    total_waybills: int


@dataclass
class UploadSummary:
    header_uuid: UUID
    mawb: str
    overtime_enabled: bool
    allocations: Dict[str, FeeAllocation]
    waybills: WaybillSummary
