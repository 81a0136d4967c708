# ==========================================
# apps/trending/admin.py
# ==========================================

from django.contrib import admin
from apps.trending.models import CurationState, TrendingEntry


@admin.register(TrendingEntry)
class TrendingEntryAdmin(admin.ModelAdmin):
    """Read-only: lists are published through the curator API."""

    list_display = ['section', 'position', 'target', 'created_at']
    list_filter = ['section']
    ordering = ['section', 'position']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(CurationState)
class CurationStateAdmin(admin.ModelAdmin):
    list_display = ['version', 'published_at', 'published_by']
    readonly_fields = ['version', 'published_at', 'published_by']

    def has_add_permission(self, request):
        return False
