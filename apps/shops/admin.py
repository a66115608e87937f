from django.contrib import admin
from .models import Category, Shop, ShopRequest, ShopRequestStatus, Review


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'color', 'is_active', 'created_by', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name']


@admin.register(Shop)
class ShopAdmin(admin.ModelAdmin):
    list_display = ['name', 'vendor', 'category', 'country', 'language', 'is_approved', 'rating', 'share_count']
    list_filter = ['is_approved', 'category', 'country', 'language']
    search_fields = ['name', 'vendor__email', 'city']
    raw_id_fields = ['vendor']
    readonly_fields = ['rating', 'review_count', 'share_count', 'created_at', 'updated_at']
    actions = ['approve_shops']

    @admin.action(description='Approve selected shops')
    def approve_shops(self, request, queryset):
        count = queryset.update(is_approved=True)
        self.message_user(request, f'Approved {count} shop(s).')


@admin.register(ShopRequest)
class ShopRequestAdmin(admin.ModelAdmin):
    list_display = ['name', 'vendor', 'country', 'status', 'created_at']
    list_filter = ['status', 'country']
    search_fields = ['name', 'vendor__email']
    actions = ['approve_requests']

    @admin.action(description='Approve selected requests')
    def approve_requests(self, request, queryset):
        from .services import approve_shop_request

        pending = queryset.filter(status=ShopRequestStatus.PENDING)
        count = 0
        for shop_request in pending:
            approve_shop_request(request_id=shop_request.id)
            count += 1
        self.message_user(request, f'Approved {count} request(s).')


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ['shop', 'user_name', 'rating', 'created_at']
    list_filter = ['rating']
    search_fields = ['shop__name', 'user__email', 'comment']
