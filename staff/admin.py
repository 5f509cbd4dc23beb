from django.contrib import admin

from .models import StaffMember


@admin.register(StaffMember)
class StaffMemberAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "department", "rights", "status", "created_at")
    list_filter = ("rights", "status", "department")
    search_fields = ("name", "email", "designation")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("id",)
