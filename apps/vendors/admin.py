from django.contrib import admin
from .models import VendorProfile, RollPackage, ShareEvent


class RollPackageInline(admin.TabularInline):
    model = RollPackage
    extra = 0
    readonly_fields = ['package_type', 'price', 'rolls_included', 'bonus_rolls', 'source', 'purchase_date']
    can_delete = False


@admin.register(VendorProfile)
class VendorProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'shop', 'available_rolls', 'total_rolls_used', 'updated_at']
    search_fields = ['user__email', 'shop__name']
    raw_id_fields = ['user', 'shop']
    readonly_fields = ['total_rolls_used', 'created_at', 'updated_at']
    inlines = [RollPackageInline]


@admin.register(RollPackage)
class RollPackageAdmin(admin.ModelAdmin):
    list_display = ['vendor_profile', 'package_type', 'price', 'rolls_included', 'bonus_rolls', 'source', 'purchase_date']
    list_filter = ['package_type', 'source', 'platform', 'is_active']
    search_fields = ['vendor_profile__user__email', 'transaction_reference']
    date_hierarchy = 'purchase_date'


@admin.register(ShareEvent)
class ShareEventAdmin(admin.ModelAdmin):
    list_display = ['user', 'platform', 'device_id', 'ip_address', 'created_at']
    list_filter = ['platform', 'verified']
    search_fields = ['user__email', 'device_id']
    readonly_fields = ['verification_hash', 'created_at']
