from django.contrib import admin

from .models import (
    CargoManifest,
    CargoManifestItem,
    DocumentStatus,
    DraftMAWB,
    DraftMAWBCharge,
    DraftMAWBItem,
    DraftMAWBItemDim,
)

FINAL_STATUSES = (DocumentStatus.CONFIRMED, DocumentStatus.REJECTED)


class FinalStatusReadOnlyMixin:
    """Lock the whole form once a document is confirmed or rejected."""

    def get_readonly_fields(self, request, obj=None):
        ro = list(super().get_readonly_fields(request, obj))
        if obj and obj.status in FINAL_STATUSES:
            for f in obj._meta.fields:
                if f.name not in ro:
                    ro.append(f.name)
        return ro


class CargoManifestItemInline(admin.TabularInline):
    model = CargoManifestItem
    extra = 0


@admin.register(CargoManifest)
class CargoManifestAdmin(FinalStatusReadOnlyMixin, admin.ModelAdmin):
    list_display = ("mawb_number", "mawb_info", "flight_no", "freight_date", "status", "updated_at")
    list_filter = ("status", "created_at")
    search_fields = ("mawb_number", "mawb_info__mawb")
    readonly_fields = ("uuid", "status", "created_at", "updated_at")
    inlines = [CargoManifestItemInline]


class ViewOnlyAdminMixin:
    """Rows that feed the draft MAWB totals; they are only written through the upsert API."""

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class DraftMAWBItemInline(ViewOnlyAdminMixin, admin.TabularInline):
    model = DraftMAWBItem
    extra = 0


class DraftMAWBChargeInline(ViewOnlyAdminMixin, admin.TabularInline):
    model = DraftMAWBCharge
    extra = 0


@admin.register(DraftMAWB)
class DraftMAWBAdmin(FinalStatusReadOnlyMixin, admin.ModelAdmin):
    list_display = ("mawb", "mawb_info", "airline_name", "currency", "total_prepaid", "status", "updated_at")
    list_filter = ("status", "currency", "created_at")
    search_fields = ("mawb", "hawb", "mawb_info__mawb")
    # Inputs and outputs of calculate_draft; the rest of the header stays editable.
    readonly_fields = (
        "uuid", "status", "prepaid", "valuation_charge", "tax", "total_other_charges_due_agent",
        "total_other_charges_due_carrier", "total_prepaid", "created_at", "updated_at",
    )
    inlines = [DraftMAWBItemInline, DraftMAWBChargeInline]


@admin.register(DraftMAWBItemDim)
class DraftMAWBItemDimAdmin(ViewOnlyAdminMixin, admin.ModelAdmin):
    list_display = ("item", "length", "width", "height", "count")
    search_fields = ("item__draft_mawb__mawb",)
