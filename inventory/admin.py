from django.contrib import admin

from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("id", "product_name", "quantity", "price_per_unit", "total_price", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("product_name",)
    readonly_fields = ("total_price", "created_at", "updated_at")
    ordering = ("id",)
