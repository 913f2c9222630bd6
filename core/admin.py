"""
Administración de la configuración global (singleton).
"""
from django.contrib import admin

from .models import GlobalSettings


@admin.register(GlobalSettings)
class GlobalSettingsAdmin(admin.ModelAdmin):
    list_display = ("__str__", "low_stock_threshold", "low_stock_send_email", "updated_at")
    readonly_fields = ("id", "created_at", "updated_at")
    fieldsets = (
        ("Alertas de stock", {
            "fields": ("low_stock_threshold", "low_stock_send_email", "low_stock_recipients"),
        }),
        ("Metadatos", {
            "fields": ("id", "created_at", "updated_at"),
        }),
    )

    def has_add_permission(self, request):
        # Solo existe una fila; se crea en GlobalSettings.load()
        return not GlobalSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
