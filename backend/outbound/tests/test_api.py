import uuid
from datetime import date
from unittest.mock import patch

import pytest
from django.contrib.auth import get_user_model
from django.db import OperationalError
from rest_framework.test import APIClient

from core.models import MawbInfo
from core.transactions import PG_QUERY_CANCELED
from mawb_engine.errors import TransactionFailure, TransactionTimeout
from mawb_engine.exception_handler import document_exception_handler
from outbound.models import (
    CargoManifest,
    CargoManifestItem,
    DraftMAWB,
    DraftMAWBCharge,
    DraftMAWBItem,
    DraftMAWBItemDim,
)

pytestmark = pytest.mark.django_db


def _mk_user():
    User = get_user_model()
    return User.objects.create_user(username="ops", password="pw")


def _mk_mawb_info():
    return MawbInfo.objects.create(
        mawb="217-99887766", date=date(2025, 9, 30), service_type="EXPORT", shipping_type="AIR",
    )


@pytest.fixture
def client():
    c = APIClient()
    c.force_authenticate(user=_mk_user())
    return c


DRAFT_BODY = {
    "mawb": "217-99887766",
    "airline_name": "THAI AIRWAYS",
    "currency": "THB",
    "prepaid": "100.00",
    "tax": "7.00",
    "items": [
        {
            "pieces_rcp": "4",
            "gross_weight": "50",
            "kg_lb": "kg",
            "rate_class": "Q",
            "rate_charge": "1.00",
            "nature_and_quantity": "CONSOL",
            "dims": [{"length": "100", "width": "100", "height": "100", "count": "4"}],
        }
    ],
    "charges": [{"key": "AWC", "value": "50.00"}],
}


def test_draft_mawb_round_trip_and_confirm(client):
    info = _mk_mawb_info()
    url = f"/api/mawbinfo/{info.uuid}/draft-mawb/"

    res = client.post(url, DRAFT_BODY, format="json")
    assert res.status_code == 200, res.content
    body = res.json()
    assert body["status"] == "Draft"
    assert body["items"][0]["total_volume"] == "4.000"
    assert body["items"][0]["chargeable_weight"] == "666.68"
    assert body["items"][0]["total"] == "666.68"
    assert body["total_other_charges_due_carrier"] == "716.68"
    assert body["total_prepaid"] == "823.68"

    res = client.get(url)
    assert res.status_code == 200
    assert res.json()["uuid"] == body["uuid"]
    assert len(res.json()["items"][0]["dims"]) == 1

    res = client.post(url + "confirm")
    assert res.status_code == 200
    assert res.json() == {"uuid": body["uuid"], "status": "Confirmed"}

    res = client.post(url + "confirm")
    assert res.status_code == 409
    assert res.json()["code"] == "invalid_status_transition"


def test_computed_fields_in_request_are_ignored(client):
    info = _mk_mawb_info()
    body = dict(DRAFT_BODY, total_prepaid="1.00", status="Confirmed")

    res = client.post(f"/api/mawbinfo/{info.uuid}/draft-mawb/", body, format="json")
    assert res.status_code == 200
    assert res.json()["total_prepaid"] == "823.68"
    assert res.json()["status"] == "Draft"


def test_cargo_manifest_replace_and_reject(client):
    info = _mk_mawb_info()
    url = f"/api/mawbinfo/{info.uuid}/cargo-manifest/"
    body = {
        "mawb_number": info.mawb,
        "flight_no": "TG620",
        "items": [{"hawb_no": "H1", "pkgs": "3"}, {"hawb_no": "H2", "pkgs": "1"}],
    }

    assert client.post(url, body, format="json").status_code == 200
    body["items"] = [{"hawb_no": "H9"}]
    res = client.post(url, body, format="json")
    assert res.status_code == 200
    assert [i["hawb_no"] for i in res.json()["items"]] == ["H9"]

    res = client.post(url + "reject")
    assert res.json()["status"] == "Rejected"


def test_unknown_parent_returns_404(client):
    res = client.post(f"/api/mawbinfo/{uuid.uuid4()}/cargo-manifest/", {"mawb_number": "x", "items": []}, format="json")
    assert res.status_code == 404
    assert res.json()["code"] == "not_found"


def test_missing_document_returns_404(client):
    info = _mk_mawb_info()
    res = client.get(f"/api/mawbinfo/{info.uuid}/draft-mawb/")
    assert res.status_code == 404


def test_non_numeric_amount_returns_400(client):
    info = _mk_mawb_info()
    body = dict(DRAFT_BODY, prepaid="lots")
    res = client.post(f"/api/mawbinfo/{info.uuid}/draft-mawb/", body, format="json")
    assert res.status_code == 400
    assert "prepaid" in res.json()


def test_requires_authentication():
    info = _mk_mawb_info()
    res = APIClient().get(f"/api/mawbinfo/{info.uuid}/draft-mawb/")
    assert res.status_code in (401, 403)


def test_timeout_maps_to_504():
    res = document_exception_handler(TransactionTimeout("draft upsert timed out"), {})
    assert res.status_code == 504
    assert res.data == {"detail": "draft upsert timed out", "code": "transaction_timeout"}

    res = document_exception_handler(TransactionFailure("draft upsert failed"), {})
    assert res.status_code == 500
    assert res.data["code"] == "transaction_failure"


def test_statement_timeout_during_upsert_returns_504(client):
    info = _mk_mawb_info()
    err = OperationalError("canceling statement due to statement timeout")
    err.__cause__ = type("QueryCanceled", (Exception,), {"pgcode": PG_QUERY_CANCELED})()

    with patch.object(DraftMAWBCharge.objects, "bulk_create", side_effect=err):
        res = client.post(f"/api/mawbinfo/{info.uuid}/draft-mawb/", DRAFT_BODY, format="json")

    assert res.status_code == 504, res.content
    assert res.json()["code"] == "transaction_timeout"
    assert DraftMAWB.objects.count() == 0


def test_deleting_mawb_info_cascades_to_both_documents(client):
    res = client.post("/api/mawbinfo/", {
        "mawb": "217-55554444", "date": "2025-10-01", "service_type": "EXPORT", "shipping_type": "AIR",
    }, format="json")
    assert res.status_code == 201, res.content
    url = f"/api/mawbinfo/{res.json()['uuid']}/"

    assert client.post(url + "draft-mawb/", DRAFT_BODY, format="json").status_code == 200
    manifest = {"mawb_number": "217-55554444", "items": [{"hawb_no": "H1"}, {"hawb_no": "H2"}]}
    assert client.post(url + "cargo-manifest/", manifest, format="json").status_code == 200
    assert DraftMAWBItemDim.objects.count() == 1

    res = client.delete(url)
    assert res.status_code == 204

    assert client.get(url).status_code == 404
    assert client.get(url + "draft-mawb/").status_code == 404
    assert client.get(url + "cargo-manifest/").status_code == 404
    for model in (DraftMAWB, DraftMAWBItem, DraftMAWBItemDim, DraftMAWBCharge, CargoManifest, CargoManifestItem):
        assert model.objects.count() == 0, model.__name__
