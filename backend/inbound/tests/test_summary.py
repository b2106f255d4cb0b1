import uuid
from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from inbound.dataclasses import WaybillRecord
from inbound.models import PreImportManifest, PreImportManifestDetail
from inbound.services.fees import compute_fee_schedule, fee_shares
from inbound.services.summary import build_manifest_summary, summarize_waybills
from mawb_engine.errors import InvalidInput, NotFound

HAWBS = ["H1", "H2", "H3"]


def _records():
    return [
        WaybillRecord(hawb_no="H1", category="2", vat=Decimal("7.00"), duty=Decimal("5.00")),
        WaybillRecord(hawb_no="H2", category="3", vat=Decimal("10.50"), duty=Decimal("20.00")),
        WaybillRecord(hawb_no="H3", category="9", vat=Decimal("1.00"), duty=Decimal("2.00")),
    ]


def _shares(enable_ot=True):
    return fee_shares(compute_fee_schedule(HAWBS, enable_ot), HAWBS)


def test_waybills_are_bucketed_by_category():
    s = summarize_waybills(_records(), _shares(), overtime_enabled=True)

    assert (s.category_2.total, s.category_3.total, s.other.total) == (1, 1, 1)
    assert s.category_2.vat == Decimal("7.00")
    # duty is not tracked for VAT-only waybills
    assert s.category_2.duty == Decimal("0.00")
    assert s.category_3.duty == Decimal("20.00")
    assert s.category_3.duty_plus_vat == Decimal("30.50")
    assert s.other.duty_plus_vat == Decimal("3.00")
    assert s.total_tax == Decimal("37.50")
    assert s.total_waybills == 3


def test_fee_shares_follow_their_waybill():
    s = summarize_waybills(_records(), _shares(), overtime_enabled=True)

    assert s.category_2.fees == {
        "custom_fee": Decimal("66.67"),
        "ot_customs_fee": Decimal("66.67"),
        "bank_fee": Decimal("23.34"),
        "cargo_permit_fee": Decimal("50.00"),
        "express_delivery_fee": Decimal("126.67"),
    }
    assert s.other.fees["custom_fee"] == Decimal("66.66")
    assert s.other.fees["express_delivery_fee"] == Decimal("126.66")

    # record order does not matter, shares are looked up by HAWB number
    reordered = summarize_waybills(list(reversed(_records())), _shares(), overtime_enabled=True)
    assert reordered.category_2.fees == s.category_2.fees
    assert reordered.other.fees == s.other.fees


def test_bucket_fees_add_up_to_allocation_totals():
    allocations = compute_fee_schedule(HAWBS, True)
    s = summarize_waybills(_records(), fee_shares(allocations, HAWBS), overtime_enabled=True)

    for name, allocation in allocations.items():
        total = s.category_2.fees[name] + s.category_3.fees[name] + s.other.fees[name]
        assert total == allocation.total_fee


def test_overtime_is_left_out_when_disabled():
    s = summarize_waybills(_records(), _shares(enable_ot=True), overtime_enabled=False)
    assert s.category_2.fees["ot_customs_fee"] == Decimal("0.00")
    assert s.category_3.fees["custom_fee"] == Decimal("66.67")

    s = summarize_waybills(_records(), _shares(enable_ot=False), overtime_enabled=False)
    assert "ot_customs_fee" not in s.category_2.fees


def test_blank_and_padded_categories():
    records = [
        WaybillRecord(hawb_no="H1", category=" 3 ", vat="1", duty="1"),
        WaybillRecord(hawb_no="H2", category="", vat="1"),
        WaybillRecord(hawb_no="H3", category="2", vat=""),
    ]
    s = summarize_waybills(records, {}, overtime_enabled=False)
    assert s.category_3.total == 1
    assert s.other.total == 1
    assert s.category_2.vat == Decimal("0.00")
    assert s.total_tax == Decimal("2.00")


def test_waybill_without_a_share_is_rejected():
    records = _records() + [WaybillRecord(hawb_no="H4", category="2")]
    with pytest.raises(InvalidInput):
        summarize_waybills(records, _shares(), overtime_enabled=True)


def test_no_waybills():
    s = summarize_waybills([], {}, overtime_enabled=False)
    assert s.total_waybills == 0
    assert s.total_tax == Decimal("0.00")


def _mk_manifest(enable_ot=False, rows=None):
    header = PreImportManifest.objects.create(
        mawb="157-11112222", flight_no="QR836", arrival_date=date(2025, 10, 2),
        origin="DOH", is_enable_customs_ot=enable_ot,
    )
    for pos, (hawb, category, vat, duty) in enumerate(rows or []):
        PreImportManifestDetail.objects.create(
            header=header, position=pos, hawb_no=hawb, category=category,
            vat=Decimal(vat), duty=Decimal(duty),
        )
    return header


ROWS = [
    ("H1", "2", "7.00", "0"),
    ("H2", "3", "10.50", "20.00"),
    ("H3", "9", "1.00", "2.00"),
]


@pytest.mark.django_db
def test_manifest_summary():
    header = _mk_manifest(enable_ot=True, rows=ROWS)

    summary = build_manifest_summary(header.uuid)

    assert summary.mawb == "157-11112222"
    assert summary.overtime_enabled is True
    assert summary.allocations["ot_customs_fee"].total_fee == Decimal("200.00")
    assert summary.allocations["custom_fee"].per_unit_fees == [Decimal("66.67"), Decimal("66.67"), Decimal("66.66")]
    assert summary.waybills.total_tax == Decimal("37.50")
    assert summary.waybills.category_3.fees["ot_customs_fee"] == Decimal("66.67")


@pytest.mark.django_db
def test_manifest_summary_without_overtime():
    header = _mk_manifest(enable_ot=False, rows=ROWS)
    summary = build_manifest_summary(str(header.uuid))

    assert summary.allocations["ot_customs_fee"].declarations == 0
    assert summary.allocations["ot_customs_fee"].per_unit_fees == []
    assert "ot_customs_fee" not in summary.waybills.category_2.fees


@pytest.mark.django_db
def test_empty_manifest_has_an_empty_summary():
    header = _mk_manifest(rows=[])
    summary = build_manifest_summary(header.uuid)
    assert summary.waybills.total_waybills == 0
    assert all(a.total_fee == Decimal("0.00") for a in summary.allocations.values())


@pytest.mark.django_db
def test_unknown_manifest_is_not_found():
    with pytest.raises(NotFound) as exc:
        build_manifest_summary(uuid.uuid4())
    assert exc.value.resource == "pre-import manifest"


@pytest.mark.django_db
def test_summary_endpoint():
    header = _mk_manifest(enable_ot=True, rows=ROWS)
    client = APIClient()
    client.force_authenticate(user=get_user_model().objects.create_user(username="inbound", password="pw"))

    res = client.get(f"/api/inbound/manifests/{header.uuid}/summary")
    assert res.status_code == 200, res.content
    body = res.json()
    assert body["header_uuid"] == str(header.uuid)
    assert body["total_waybills"] == 3
    assert body["total_tax"] == "37.50"
    assert body["allocations"]["custom_fee"]["per_unit_fees"] == ["66.67", "66.67", "66.66"]
    assert body["allocations"]["express_delivery_fee"]["declarations"] is None
    assert body["category_3"]["duty_plus_vat"] == "30.50"
    assert body["category_2"]["fees"]["bank_fee"] == "23.34"

    res = client.get(f"/api/inbound/manifests/{uuid.uuid4()}/summary")
    assert res.status_code == 404
    assert res.json()["code"] == "not_found"


@pytest.mark.django_db
def test_manifest_header_create_get_and_list():
    client = APIClient()
    client.force_authenticate(user=get_user_model().objects.create_user(username="inbound", password="pw"))
    body = {
        "mawb": "157-11112222", "flight_no": "QR836", "arrival_date": "2025-10-02", "origin": "DOH",
        "is_enable_customs_ot": True,
        "details": [
            {"hawb_no": "H1", "category": "2", "vat": "7.00"},
            {"hawb_no": "H2", "category": "3", "vat": "10.50", "duty": "20.00"},
            {"hawb_no": "H3", "category": "9", "vat": "1.00", "duty": "2.00"},
        ],
    }

    res = client.post("/api/inbound/manifests/", body, format="json")
    assert res.status_code == 201, res.content
    created = res.json()
    assert [row["hawb_no"] for row in created["details"]] == ["H1", "H2", "H3"]

    res = client.get(f"/api/inbound/manifests/{created['uuid']}/")
    assert res.status_code == 200
    assert res.json()["is_enable_customs_ot"] is True
    assert res.json()["details"][1]["duty"] == "20.00"

    res = client.get(f"/api/inbound/manifests/{created['uuid']}/summary")
    assert res.json()["total_tax"] == "37.50"

    res = client.get("/api/inbound/manifests/", {"mawb": "157-11112222"})
    assert [row["uuid"] for row in res.json()] == [created["uuid"]]
    assert "details" not in res.json()[0]

    assert client.get(f"/api/inbound/manifests/{uuid.uuid4()}/").status_code == 404


@pytest.mark.django_db
def test_manifest_with_repeated_hawb_is_rejected():
    client = APIClient()
    client.force_authenticate(user=get_user_model().objects.create_user(username="inbound", password="pw"))
    body = {"mawb": "157-1", "details": [{"hawb_no": "H1"}, {"hawb_no": "H1"}]}

    res = client.post("/api/inbound/manifests/", body, format="json")
    assert res.status_code == 400
    assert "details" in res.json()
    assert PreImportManifest.objects.count() == 0
