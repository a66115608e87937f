from django.contrib import admin
from .models import WeeklyShopShare


@admin.register(WeeklyShopShare)
class WeeklyShopShareAdmin(admin.ModelAdmin):
    list_display = ['shop', 'country', 'week_start', 'share_count']
    list_filter = ['country', 'week_start']
    search_fields = ['shop__name']
    raw_id_fields = ['shop']
