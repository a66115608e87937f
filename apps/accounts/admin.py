# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, UserRole, EmailVerification


ROLE_COLORS = {
    UserRole.ADMIN: '#B85C5C',
    UserRole.VENDOR: '#A47449',
    UserRole.USER: '#6B8E5E',
}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for User model.

    Provides:
    - User listing with role and share stats
    - Filtering by role, status and country
    - Bulk activation and role changes
    """

    list_display = [
        'email',
        'name',
        'role_badge',
        'is_active',
        'country',
        'total_shares',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'is_staff',
        'country',
        'created_at',
    ]

    search_fields = [
        'email',
        'name',
        'city',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'name', 'password', 'role')
        }),
        ('Profile', {
            'fields': ('age', 'gender', 'country', 'city', 'language'),
        }),
        ('Sharing', {
            'fields': ('total_shares', 'last_share_date'),
            'classes': ('collapse',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'name', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
        'total_shares',
        'last_share_date',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def role_badge(self, obj):
        """Display role as colored badge."""
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            ROLE_COLORS.get(obj.role, '#ccc'),
            obj.get_role_display(),
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    actions = [
        'activate_users',
        'deactivate_users',
        'make_vendor',
    ]

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (superusers are skipped)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)

    @admin.action(description='Promote selected users to vendor')
    def make_vendor(self, request, queryset):
        from apps.vendors.services import get_or_create_vendor_profile

        count = 0
        for user in queryset.filter(role=UserRole.USER):
            user.role = UserRole.VENDOR
            user.save(update_fields=['role'])
            get_or_create_vendor_profile(user=user)
            count += 1
        self.message_user(request, f'Promoted {count} user(s) to vendor.')


@admin.register(EmailVerification)
class EmailVerificationAdmin(admin.ModelAdmin):
    list_display = ['email', 'is_used', 'expires_at', 'created_at']
    list_filter = ['is_used']
    search_fields = ['email']
    readonly_fields = ['code', 'created_at']
