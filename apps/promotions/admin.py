from django.contrib import admin
from .models import Offer, Coupon, Ad


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ['title', 'shop', 'discount', 'sale_price', 'expiry_date', 'is_limited']
    list_filter = ['is_limited', 'expiry_date']
    search_fields = ['title', 'shop__name']
    raw_id_fields = ['shop']


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = ['code', 'shop', 'discount', 'expiry_date', 'expired']
    search_fields = ['code', 'shop__name']
    raw_id_fields = ['shop']

    @admin.display(boolean=True, description='Expired')
    def expired(self, obj):
        return obj.is_expired


@admin.register(Ad)
class AdAdmin(admin.ModelAdmin):
    list_display = ['title', 'link_type', 'shop', 'priority', 'is_active', 'created_at']
    list_filter = ['is_active', 'link_type']
    list_editable = ['priority', 'is_active']
    search_fields = ['title']
    raw_id_fields = ['shop', 'created_by']
