# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, DevicePasscode, UserRole


ROLE_COLORS = {
    UserRole.STUDENT: '#2563EB',
    UserRole.MERCHANT: '#16A34A',
    UserRole.BRAND: '#9333EA',
    UserRole.RECRUITER: '#EA580C',
    UserRole.ADMIN: '#111827',
}


class DevicePasscodeInline(admin.TabularInline):
    model = DevicePasscode
    extra = 0
    fields = ['device_id', 'failed_attempts', 'locked_until', 'last_used_at']
    readonly_fields = fields
    can_delete = True


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Marketplace accounts. Profiles live in the onboarding admin."""

    list_display = ['email', 'display_name', 'role_badge', 'is_active', 'email_verified', 'created_at', 'last_login']
    list_filter = ['role', 'is_active', 'is_staff', 'email_verified']
    search_fields = ['email', 'display_name']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
    inlines = [DevicePasscodeInline]

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Marketplace', {'fields': ('display_name', 'role', 'email_verified')}),
        ('Access', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Activity', {'fields': ('created_at', 'last_login'), 'classes': ('collapse',)}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'role', 'password1', 'password2'),
        }),
    )
    readonly_fields = ['created_at', 'last_login']
    filter_horizontal = ['groups', 'user_permissions']

    actions = ['unlock_devices', 'deactivate_users']

    def role_badge(self, obj):
        return format_html(
            '<span style="color: white; background-color: {}; padding: 2px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            ROLE_COLORS.get(obj.role, '#6B7280'),
            obj.get_role_display(),
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    @admin.action(description='Unlock passcode devices')
    def unlock_devices(self, request, queryset):
        count = DevicePasscode.objects.filter(user__in=queryset).update(failed_attempts=0, locked_until=None)
        self.message_user(request, f'Unlocked {count} device(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        # Superusers are never deactivated from a bulk action.
        count = queryset.filter(is_superuser=False).update(is_active=False)
        self.message_user(request, f'Deactivated {count} user(s).')


@admin.register(DevicePasscode)
class DevicePasscodeAdmin(admin.ModelAdmin):
    list_display = ['user', 'device_id', 'failed_attempts', 'locked_until', 'last_used_at']
    search_fields = ['user__email', 'device_id']
    readonly_fields = ['passcode_hash', 'created_at', 'updated_at']
    raw_id_fields = ['user']
