# ==========================================
# apps/tracking/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from apps.tracking.models import RedemptionRecord, RedemptionStatus


STATUS_COLORS = {
    RedemptionStatus.REVEALED: '#6c757d',
    RedemptionStatus.COPIED: '#17a2b8',
    RedemptionStatus.CLICKED: '#ffc107',
    RedemptionStatus.REDEEMED: '#28a745',
}


@admin.register(RedemptionRecord)
class RedemptionRecordAdmin(admin.ModelAdmin):
    list_display = ['revealed_at', 'offer', 'brand', 'student', 'code', 'status_badge', 'device_type', 'source']
    list_filter = ['status', 'device_type', 'source', 'revealed_at']
    search_fields = ['code', 'offer__title', 'brand__name', 'student__bb_id']
    date_hierarchy = 'revealed_at'
    raw_id_fields = ['student', 'offer', 'brand']
    readonly_fields = ['revealed_at', 'copied_at', 'clicked_through_at', 'redeemed_at', 'verified']

    def status_badge(self, obj):
        return format_html(
            '<span style="color: white; background-color: {}; padding: 3px 10px; '
            'border-radius: 3px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#6c757d'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'

    def has_delete_permission(self, request, obj=None):
        return False
