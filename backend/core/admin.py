from django.contrib import admin

from .models import MawbInfo


@admin.register(MawbInfo)
class MawbInfoAdmin(admin.ModelAdmin):
    list_display = ("mawb", "date", "service_type", "shipping_type", "chargeable_weight", "created_at")
    list_filter = ("service_type", "shipping_type", "date")
    search_fields = ("mawb",)
    date_hierarchy = "date"
    readonly_fields = ("uuid", "created_at", "updated_at")
