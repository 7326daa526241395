"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "key",
        "license_type",
        "binding_display",
        "bound_at",
        "created_at",
    ]
    list_filter = ["license_type", "bound", "created_at"]
    search_fields = ["key", "bound_domain"]
    # Binding is owned by activation; unbinding is not an admin operation.
    readonly_fields = ["bound", "bound_domain", "bound_at", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("key", "license_type"),
            },
        ),
        (
            "Binding",
            {
                "fields": ("bound", "bound_domain", "bound_at"),
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

    def get_readonly_fields(self, request, obj=None):
        """The key is immutable once provisioned."""
        if obj is not None:
            return ["key", *self.readonly_fields]
        return self.readonly_fields

    def binding_display(self, obj):
        """Display binding state with color."""
        if obj.bound:
            return format_html('<span style="color: green; font-weight: bold;">{}</span>', obj.bound_domain)
        return format_html('<span style="color: gray;">{}</span>', "Unbound")

    binding_display.short_description = "Bound Domain"
