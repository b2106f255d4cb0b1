from decimal import Decimal

import pytest

from mawb_engine.errors import InvalidInput
from outbound.dataclasses import DocumentPayload
from outbound.services.totals import calculate_draft, calculate_item


def test_item_total_is_rate_times_chargeable_weight():
    item = {
        "gross_weight": Decimal("100"),
        "kg_lb": "kg",
        "rate_charge": Decimal("12.5"),
        "dims": [{"length": 100, "width": 100, "height": 100, "count": 1}],
    }
    calculate_item(item)
    assert item["total_volume"] == Decimal("1.000")
    assert item["chargeable_weight"] == Decimal("166.67")
    # 12.5 * 166.67 = 2083.375 -> 2083.38
    assert item["total"] == Decimal("2083.38")


def test_item_without_dims_uses_gross_weight():
    item = {"gross_weight": "20", "rate_charge": "3"}
    calculate_item(item)
    assert item["chargeable_weight"] == Decimal("20.00")
    assert item["total"] == Decimal("60.00")


def test_header_totals_combine_items_and_charges():
    payload = DocumentPayload(
        header={"prepaid": Decimal("100"), "tax": Decimal("7"), "valuation_charge": Decimal("0")},
        items=[
            {"gross_weight": "100", "kg_lb": "kg", "rate_charge": "10",
             "dims": [{"length": 100, "width": 50, "height": 30, "count": 2}]},
        ],
        charges=[{"key": "AWC", "value": Decimal("50")}, {"key": "MYC", "value": "25.50"}],
    )
    calculate_draft(payload)

    assert payload.items[0]["total"] == Decimal("1000.00")
    assert payload.header["total_other_charges_due_carrier"] == Decimal("1075.50")
    # 100 + 0 + 7 + 0 + 1075.50
    assert payload.header["total_prepaid"] == Decimal("1182.50")


def test_missing_charges_count_as_zero():
    payload = DocumentPayload(header={}, items=[], charges=None)
    calculate_draft(payload)
    assert payload.header["total_other_charges_due_carrier"] == Decimal("0.00")
    assert payload.header["total_prepaid"] == Decimal("0.00")


def test_bad_rate_is_rejected_before_any_storage():
    with pytest.raises(InvalidInput):
        calculate_item({"gross_weight": "1", "rate_charge": "ten"})
