"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from licenses.infrastructure.models import AuditLog, License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "license_key",
        "product",
        "owner_name",
        "owner_email",
        "status_display",
        "expires_at",
        "created_at",
    ]
    list_filter = ["product", "is_activated", "expires_at", "created_at"]
    search_fields = ["license_key", "product", "owner_email", "owner_name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "license_key", "product", "is_activated"),
            },
        ),
        (
            "Owner",
            {
                "fields": ("owner_name", "owner_email"),
            },
        ),
        (
            "Expiration",
            {
                "fields": ("expires_at",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def status_display(self, obj):
        """Display expiry status with color coding."""
        if obj.expires_at is not None and obj.expires_at < timezone.now():
            return format_html('<span style="color: gray; font-weight: bold;">{}</span>', "EXPIRED")
        return format_html('<span style="color: green; font-weight: bold;">{}</span>', "VALID")

    status_display.short_description = "Status"


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    """Admin interface for AuditLog model. Entries are append-only."""

    list_display = ["changed_at", "action", "license_key", "product", "details"]
    list_filter = ["action", "product", "changed_at"]
    search_fields = ["license_key", "product", "details"]
    readonly_fields = ["id", "action", "license_key", "product", "changed_at", "details"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
