from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from apps.shops.serializers import ShopSummarySerializer
from .models import Roll, Comment, DEFAULT_ROLL_CATEGORY, DEFAULT_ROLL_DURATION


# =============================================================================
# Rolls
# =============================================================================

class RollSerializer(serializers.ModelSerializer):
    """
    Roll with per-user flags.

    is_liked / is_saved are looked up in the ``liked_ids`` and
    ``saved_ids`` sets passed through the serializer context.
    """

    shop = ShopSummarySerializer(read_only=True)
    created_by = UserPublicSerializer(read_only=True)
    is_liked = serializers.SerializerMethodField()
    is_saved = serializers.SerializerMethodField()

    class Meta:
        model = Roll
        fields = [
            'id',
            'shop',
            'video_url',
            'caption',
            'category',
            'duration',
            'likes_count',
            'comments_count',
            'saves_count',
            'shares_count',
            'created_by',
            'is_liked',
            'is_saved',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_is_liked(self, obj) -> bool:
        return obj.id in self.context.get('liked_ids', ())

    def get_is_saved(self, obj) -> bool:
        return obj.id in self.context.get('saved_ids', ())


class RollCreateSerializer(serializers.Serializer):
    shop_id = serializers.UUIDField()
    video_url = serializers.URLField(max_length=500)
    caption = serializers.CharField(required=False, allow_blank=True, default='')
    category = serializers.CharField(required=False, max_length=100, default=DEFAULT_ROLL_CATEGORY)
    duration = serializers.IntegerField(required=False, min_value=1, default=DEFAULT_ROLL_DURATION)


class RollCreateResponseSerializer(serializers.Serializer):
    roll = RollSerializer()
    remaining_rolls = serializers.IntegerField(allow_null=True)


class RollUpdateSerializer(serializers.Serializer):
    caption = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, max_length=100)
    duration = serializers.IntegerField(required=False, min_value=1)


class FeedQuerySerializer(serializers.Serializer):
    category = serializers.CharField(required=False, max_length=100)
    cursor = serializers.DateTimeField(required=False)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100, default=20)


class FeedResponseSerializer(serializers.Serializer):
    rolls = RollSerializer(many=True)
    next_cursor = serializers.DateTimeField(allow_null=True)
    has_more = serializers.BooleanField()


# =============================================================================
# Comments
# =============================================================================

class CommentSerializer(serializers.ModelSerializer):
    user = UserPublicSerializer(read_only=True)
    is_liked = serializers.SerializerMethodField()

    class Meta:
        model = Comment
        fields = ['id', 'roll', 'user', 'comment', 'likes_count', 'is_liked', 'created_at', 'updated_at']
        read_only_fields = fields

    def get_is_liked(self, obj) -> bool:
        return obj.id in self.context.get('liked_ids', ())


class CommentWriteSerializer(serializers.Serializer):
    comment = serializers.CharField(max_length=2000, allow_blank=True)
