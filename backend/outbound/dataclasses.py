from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from core.money import ZERO


@dataclass
class DimensionEntry:
    length: Decimal
    width: Decimal
    height: Decimal
    count: Decimal

    @property
    def is_measurable(self) -> bool:
        return self.length > 0 and self.width > 0 and self.height > 0 and self.count > 0

    def volume_m3(self) -> Decimal:
        if not self.is_measurable:
            return ZERO
        return (self.length * self.width * self.height) / Decimal(1_000_000) * self.count


@dataclass
class ChargeableWeightResult:
    total_volume_m3: Decimal
    chargeable_weight_kg: Decimal


@dataclass
class DocumentPayload:
    """Validated header fields plus ordered children, ready to be written."""
    header: Dict[str, Any]
    items: List[Dict[str, Any]] = field(default_factory=list)
    charges: Optional[List[Dict[str, Any]]] = None
