# ==========================================
# apps/transactions/admin.py
# ==========================================

from django.contrib import admin
from apps.transactions.models import Rating, Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Read-mostly view of confirmed redemptions."""

    list_display = [
        'scanned_at',
        'student_bb_id',
        'student_name',
        'merchant_name',
        'offer_title',
        'final_amount',
        'discount_amount',
        'payment_method',
        'status',
    ]
    list_filter = ['status', 'payment_method', 'scanned_at']
    search_fields = ['student_bb_id', 'student_name', 'merchant_bbm_id', 'merchant_name', 'offer_title']
    date_hierarchy = 'scanned_at'
    ordering = ['-scanned_at']
    raw_id_fields = ['student', 'merchant', 'offer', 'scanned_by']
    readonly_fields = [
        'student_bb_id', 'student_name', 'merchant_bbm_id', 'merchant_name', 'offer_title',
        'original_amount', 'discount_amount', 'final_amount', 'scanned_at',
    ]


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'merchant', 'student', 'stars']
    list_filter = ['stars', 'created_at']
    search_fields = ['merchant__business_name', 'student__bb_id', 'review_text']
    raw_id_fields = ['transaction', 'student', 'merchant']
    readonly_fields = ['created_at']
