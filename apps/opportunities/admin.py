# ==========================================
# apps/opportunities/admin.py
# ==========================================

from django.contrib import admin

from apps.opportunities.models import Opportunity, OpportunityApplication, OpportunityCategory
from apps.opportunities.services import review_opportunity, InvalidStatusTransitionError


@admin.register(OpportunityCategory)
class OpportunityCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'display_order', 'is_active']
    list_editable = ['display_order', 'is_active']


@admin.register(Opportunity)
class OpportunityAdmin(admin.ModelAdmin):
    """Moderation queue for recruiter listings."""

    list_display = [
        'title',
        'recruiter',
        'type',
        'work_mode',
        'city',
        'status',
        'total_applications',
        'created_at',
    ]
    list_filter = ['status', 'type', 'work_mode', 'created_at']
    search_fields = ['title', 'recruiter__company_name', 'recruiter__bbr_id']
    readonly_fields = ['total_applications', 'created_at', 'updated_at']
    raw_id_fields = ['recruiter']
    date_hierarchy = 'created_at'
    actions = ['approve_selected', 'reject_selected']

    def _review(self, request, queryset, approve, verb):
        done = skipped = 0
        for opportunity in queryset:
            try:
                review_opportunity(opportunity_id=opportunity.pk, approve=approve)
                done += 1
            except InvalidStatusTransitionError:
                skipped += 1
        msg = f'{verb} {done} listing(s).'
        if skipped:
            msg += f' Skipped {skipped} not pending review.'
        self.message_user(request, msg)

    @admin.action(description='Approve selected listings')
    def approve_selected(self, request, queryset):
        self._review(request, queryset, True, 'Approved')

    @admin.action(description='Reject selected listings')
    def reject_selected(self, request, queryset):
        self._review(request, queryset, False, 'Rejected')


@admin.register(OpportunityApplication)
class OpportunityApplicationAdmin(admin.ModelAdmin):
    list_display = ['student', 'opportunity', 'status', 'applied_at']
    list_filter = ['status']
    search_fields = ['student__bb_id', 'student__full_name', 'opportunity__title']
    raw_id_fields = ['student', 'opportunity']
