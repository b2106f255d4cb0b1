import uuid
from datetime import date

import pytest

from core.models import MawbInfo
from mawb_engine.errors import InvalidStatusTransition, NotFound
from outbound.dataclasses import DocumentPayload
from outbound.models import CargoManifest, DocumentStatus
from outbound.services import upsert, workflow

pytestmark = pytest.mark.django_db


@pytest.fixture
def mawb_info():
    return MawbInfo.objects.create(
        mawb="618-55501234", date=date(2025, 10, 1), service_type="EXPORT", shipping_type="AIR",
    )


def _upsert_manifest(mawb_info):
    return upsert.upsert_cargo_manifest(
        mawb_info.uuid,
        DocumentPayload(header={"mawb_number": mawb_info.mawb}, items=[{"hawb_no": "H1"}]),
    )


def _upsert_draft(mawb_info):
    return upsert.upsert_draft_mawb(
        mawb_info.uuid,
        DocumentPayload(header={"mawb": mawb_info.mawb}, items=[{"gross_weight": "10", "rate_charge": "2"}]),
    )


def test_transition_table():
    D, P, C, R = workflow.DRAFT, workflow.PENDING, workflow.CONFIRMED, workflow.REJECTED
    assert workflow.can_transition(D, C)
    assert workflow.can_transition(D, R)
    assert workflow.can_transition(D, P)
    assert workflow.can_transition(P, C)
    assert workflow.can_transition(P, R)
    assert not workflow.can_transition(P, D)
    for terminal in (C, R):
        for target in (D, P, C, R):
            assert not workflow.can_transition(terminal, target)


def test_enum_members_and_values_agree():
    assert workflow.can_transition(DocumentStatus.DRAFT, DocumentStatus.CONFIRMED)
    assert not workflow.can_transition(DocumentStatus.CONFIRMED, DocumentStatus.REJECTED)


def test_confirm_draft_mawb(mawb_info):
    _upsert_draft(mawb_info)
    doc = workflow.confirm_draft_mawb(mawb_info.uuid)
    assert doc.status == workflow.CONFIRMED
    assert upsert.get_draft_mawb(mawb_info.uuid).status == DocumentStatus.CONFIRMED


def test_reject_cargo_manifest(mawb_info):
    _upsert_manifest(mawb_info)
    doc = workflow.reject_cargo_manifest(mawb_info.uuid)
    assert doc.status == workflow.REJECTED


def test_confirming_twice_is_refused(mawb_info):
    _upsert_manifest(mawb_info)
    workflow.confirm_cargo_manifest(mawb_info.uuid)

    with pytest.raises(InvalidStatusTransition) as exc:
        workflow.confirm_cargo_manifest(mawb_info.uuid)
    assert exc.value.current == "Confirmed"
    assert exc.value.target == "Confirmed"


def test_rejecting_a_confirmed_document_is_refused(mawb_info):
    _upsert_draft(mawb_info)
    workflow.confirm_draft_mawb(mawb_info.uuid)

    with pytest.raises(InvalidStatusTransition):
        workflow.reject_draft_mawb(mawb_info.uuid)
    assert upsert.get_draft_mawb(mawb_info.uuid).status == DocumentStatus.CONFIRMED


def test_pending_document_can_still_be_confirmed(mawb_info):
    _upsert_manifest(mawb_info)
    CargoManifest.objects.filter(mawb_info=mawb_info).update(status=DocumentStatus.PENDING)

    doc = workflow.confirm_cargo_manifest(mawb_info.uuid)
    assert doc.status == workflow.CONFIRMED


def test_replacing_a_confirmed_document_reopens_it(mawb_info):
    _upsert_manifest(mawb_info)
    workflow.confirm_cargo_manifest(mawb_info.uuid)

    assert _upsert_manifest(mawb_info).status == DocumentStatus.DRAFT
    assert workflow.confirm_cargo_manifest(mawb_info.uuid).status == workflow.CONFIRMED


def test_unknown_parent_is_not_found():
    with pytest.raises(NotFound) as exc:
        workflow.confirm_draft_mawb(uuid.uuid4())
    assert exc.value.resource == "mawb info"


def test_parent_without_document_is_not_found(mawb_info):
    with pytest.raises(NotFound) as exc:
        workflow.confirm_cargo_manifest(mawb_info.uuid)
    assert exc.value.resource == "cargo manifest"
