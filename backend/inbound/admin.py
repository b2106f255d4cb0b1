from django.contrib import admin

from .models import PreImportManifest, PreImportManifestDetail


class PreImportManifestDetailInline(admin.TabularInline):
    model = PreImportManifestDetail
    extra = 0


@admin.register(PreImportManifest)
class PreImportManifestAdmin(admin.ModelAdmin):
    list_display = ("mawb", "flight_no", "arrival_date", "origin", "is_enable_customs_ot", "created_at")
    list_filter = ("is_enable_customs_ot", "arrival_date")
    search_fields = ("mawb", "details__hawb_no")
    readonly_fields = ("uuid", "created_at", "updated_at")
    inlines = [PreImportManifestDetailInline]
