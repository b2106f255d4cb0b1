from __future__ import annotations

from rest_framework import serializers

from .dataclasses import DocumentPayload
from .models import (
    CargoManifest,
    CargoManifestItem,
    DraftMAWB,
    DraftMAWBCharge,
    DraftMAWBItem,
    DraftMAWBItemDim,
)

DOCUMENT_READ_ONLY = ("uuid", "mawb_info", "status", "created_at", "updated_at")


# ---------- CARGO MANIFEST ----------
class CargoManifestItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = CargoManifestItem
        exclude = ("cargo_manifest", "position")
        read_only_fields = ("id",)


class CargoManifestSerializer(serializers.ModelSerializer):
    items = CargoManifestItemSerializer(many=True)

    class Meta:
        model = CargoManifest
        fields = "__all__"
        read_only_fields = DOCUMENT_READ_ONLY


# ---------- DRAFT MAWB (items -> dims, plus sibling charges) ----------
class DraftMAWBItemDimSerializer(serializers.ModelSerializer):
    class Meta:
        model = DraftMAWBItemDim
        exclude = ("item", "position")
        read_only_fields = ("id",)


class DraftMAWBItemSerializer(serializers.ModelSerializer):
    dims = DraftMAWBItemDimSerializer(many=True, required=False)

    class Meta:
        model = DraftMAWBItem
        exclude = ("draft_mawb", "position")
        # computed from dims / gross weight / rate on every write
        read_only_fields = ("id", "total_volume", "chargeable_weight", "total")


class DraftMAWBChargeSerializer(serializers.ModelSerializer):
    class Meta:
        model = DraftMAWBCharge
        exclude = ("draft_mawb", "position")
        read_only_fields = ("id",)


class DraftMAWBSerializer(serializers.ModelSerializer):
    items = DraftMAWBItemSerializer(many=True)
    charges = DraftMAWBChargeSerializer(many=True, required=False)

    class Meta:
        model = DraftMAWB
        fields = "__all__"
        read_only_fields = DOCUMENT_READ_ONLY + ("total_other_charges_due_carrier", "total_prepaid")


def to_payload(validated_data) -> DocumentPayload:
    """Split validated serializer data into header fields and child rows."""
    header = dict(validated_data)
    items = [dict(item) for item in header.pop("items", [])]
    for item in items:
        if "dims" in item:
            item["dims"] = [dict(dim) for dim in item["dims"]]
    charges = header.pop("charges", None)
    if charges is not None:
        charges = [dict(ch) for ch in charges]
    return DocumentPayload(header=header, items=items, charges=charges)
