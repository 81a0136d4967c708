# ==========================================
# apps/offers/admin.py
# ==========================================

from django.contrib import admin
from apps.offers.models import Favorite, Offer, OnlineOffer


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    """Admin interface for in-store offers."""

    list_display = [
        'title',
        'merchant',
        'type',
        'original_price',
        'final_price',
        'status',
        'total_redemptions',
        'valid_until',
    ]
    list_filter = ['status', 'type', 'created_at']
    search_fields = ['title', 'merchant__business_name', 'merchant__bbm_id']
    readonly_fields = ['discount_amount', 'final_price', 'total_redemptions', 'created_at', 'updated_at']
    raw_id_fields = ['merchant']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Offer', {
            'fields': ('merchant', 'title', 'description', 'type', 'status')
        }),
        ('Pricing', {
            'fields': (
                'original_price', 'discount_value', 'max_discount', 'min_order_value',
                'discount_amount', 'final_price', 'free_item_name',
            )
        }),
        ('Limits', {
            'fields': ('max_uses_per_student', 'valid_from', 'valid_until', 'terms')
        }),
        ('Metadata', {
            'fields': ('total_redemptions', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(OnlineOffer)
class OnlineOfferAdmin(admin.ModelAdmin):
    list_display = ['title', 'brand', 'code', 'location_scope', 'is_active', 'created_at']
    list_filter = ['is_active', 'location_scope']
    search_fields = ['title', 'code', 'brand__name']
    raw_id_fields = ['brand']


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ['student', 'offer', 'created_at']
    search_fields = ['student__bb_id', 'student__full_name', 'offer__title']
    raw_id_fields = ['student', 'offer']
