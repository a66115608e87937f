from django.contrib import admin
from .models import Roll, Comment, SavedRoll


@admin.register(Roll)
class RollAdmin(admin.ModelAdmin):
    list_display = ['id', 'shop', 'category', 'likes_count', 'comments_count', 'shares_count', 'created_by', 'created_at']
    list_filter = ['category', 'created_at']
    search_fields = ['caption', 'shop__name', 'created_by__email']
    raw_id_fields = ['shop', 'created_by']
    readonly_fields = ['likes_count', 'comments_count', 'saves_count', 'shares_count', 'created_at', 'updated_at']
    exclude = ['likes']


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ['roll', 'user', 'comment', 'likes_count', 'created_at']
    search_fields = ['comment', 'user__email']
    raw_id_fields = ['roll', 'user']
    exclude = ['likes']


@admin.register(SavedRoll)
class SavedRollAdmin(admin.ModelAdmin):
    list_display = ['user', 'roll', 'created_at']
    raw_id_fields = ['user', 'roll']
