from rest_framework import serializers

from .models import PreImportManifest, PreImportManifestDetail

MONEY = dict(max_digits=18, decimal_places=2)


# ---------- PRE-IMPORT MANIFEST ----------
class PreImportManifestDetailSerializer(serializers.ModelSerializer):
    class Meta:
        model = PreImportManifestDetail
        exclude = ("header", "position")
        read_only_fields = ("id",)
        # (header, hawb_no) uniqueness is checked across the whole list below
        validators = []


class PreImportManifestHeaderSerializer(serializers.ModelSerializer):
    class Meta:
        model = PreImportManifest
        fields = "__all__"
        read_only_fields = ("uuid", "created_at", "updated_at")


class PreImportManifestSerializer(PreImportManifestHeaderSerializer):
    details = PreImportManifestDetailSerializer(many=True, required=False)

    def validate_details(self, value):
        seen = set()
        for row in value:
            if row["hawb_no"] in seen:
                raise serializers.ValidationError(f"duplicate hawb_no {row['hawb_no']!r}")
            seen.add(row["hawb_no"])
        return value

    def create(self, validated_data):
        details = validated_data.pop("details", [])
        header = PreImportManifest.objects.create(**validated_data)
        PreImportManifestDetail.objects.bulk_create(
            [PreImportManifestDetail(header=header, position=pos, **row) for pos, row in enumerate(details)]
        )
        return header


# Read-only; built from the summary dataclasses, never from request data.
class FeeAllocationSerializer(serializers.Serializer):
    declarations = serializers.IntegerField(allow_null=True)
    total_fee = serializers.DecimalField(**MONEY)
    floor_per_unit = serializers.DecimalField(**MONEY)
    per_unit_fees = serializers.ListField(child=serializers.DecimalField(**MONEY))


class CategorySummarySerializer(serializers.Serializer):
    category = serializers.CharField()
    total = serializers.IntegerField()
    vat = serializers.DecimalField(**MONEY)
    duty = serializers.DecimalField(**MONEY)
    duty_plus_vat = serializers.DecimalField(**MONEY)
    fees = serializers.DictField(child=serializers.DecimalField(**MONEY))


class UploadSummarySerializer(serializers.Serializer):
    header_uuid = serializers.UUIDField()
    mawb = serializers.CharField()
    overtime_enabled = serializers.BooleanField()
    allocations = serializers.DictField(child=FeeAllocationSerializer())
    category_2 = CategorySummarySerializer(source="waybills.category_2")
    category_3 = CategorySummarySerializer(source="waybills.category_3")
    other = CategorySummarySerializer(source="waybills.other")
    total_tax = serializers.DecimalField(source="waybills.total_tax", **MONEY)
    total_waybills = serializers.IntegerField(source="waybills.total_waybills")
