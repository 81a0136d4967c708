# ==========================================
# apps/onboarding/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html

from apps.onboarding.models import (
    ApprovalStatus,
    IdentifierSequence,
    Merchant,
    OnlineBrand,
    Recruiter,
    Student,
)
from apps.onboarding.services import approve, suspend, InvalidStatusTransitionError

STATUS_COLORS = {
    ApprovalStatus.PENDING: '#C9A227',
    ApprovalStatus.APPROVED: '#2E9E5B',
    ApprovalStatus.REJECTED: '#B85C5C',
    ApprovalStatus.SUSPENDED: '#6B6B6B',
}


class ApplicationAdmin(admin.ModelAdmin):
    """Shared list badges and bulk approval actions."""

    list_filter = ['status', 'created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    raw_id_fields = ['user']
    actions = ['approve_selected', 'suspend_selected']

    def status_badge(self, obj):
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#6B6B6B'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def _bulk(self, request, queryset, transition, verb):
        done = skipped = 0
        for profile in queryset:
            try:
                transition(profile)
                done += 1
            except InvalidStatusTransitionError:
                skipped += 1
        msg = f'{verb} {done} application(s).'
        if skipped:
            msg += f' Skipped {skipped} with an incompatible status.'
        self.message_user(request, msg)

    @admin.action(description='Approve selected applications')
    def approve_selected(self, request, queryset):
        self._bulk(request, queryset, approve, 'Approved')

    @admin.action(description='Suspend selected applications')
    def suspend_selected(self, request, queryset):
        self._bulk(request, queryset, suspend, 'Suspended')


@admin.register(Student)
class StudentAdmin(ApplicationAdmin):
    list_display = ['full_name', 'bb_id', 'college', 'city', 'status_badge', 'total_redemptions', 'created_at']
    search_fields = ['full_name', 'email', 'college', 'bb_id']
    readonly_fields = ['bb_id', 'approved_at', 'total_savings', 'total_redemptions', 'created_at', 'updated_at']


@admin.register(Merchant)
class MerchantAdmin(ApplicationAdmin):
    list_display = ['business_name', 'bbm_id', 'category', 'city', 'status_badge', 'trending_score', 'is_trending_override']
    list_filter = ['status', 'category', 'is_online_store', 'is_trending_override', 'created_at']
    search_fields = ['business_name', 'owner_name', 'email', 'bbm_id', 'city']
    readonly_fields = ['bbm_id', 'approved_at', 'trending_score', 'created_at', 'updated_at']
    list_editable = ['is_trending_override']


@admin.register(Recruiter)
class RecruiterAdmin(ApplicationAdmin):
    list_display = ['company_name', 'bbr_id', 'contact_name', 'status_badge', 'created_at']
    search_fields = ['company_name', 'contact_name', 'email', 'bbr_id']
    readonly_fields = ['bbr_id', 'approved_at', 'created_at', 'updated_at']


@admin.register(OnlineBrand)
class OnlineBrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'category', 'is_active', 'created_at']
    list_filter = ['is_active', 'category']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    raw_id_fields = ['user']


@admin.register(IdentifierSequence)
class IdentifierSequenceAdmin(admin.ModelAdmin):
    list_display = ['prefix', 'last_value']
    readonly_fields = ['prefix', 'last_value']
