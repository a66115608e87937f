from rest_framework import serializers


class ShareShopInputSerializer(serializers.Serializer):
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)


class ShareShopResponseSerializer(serializers.Serializer):
    share_count = serializers.IntegerField()


class TopSharedShopSerializer(serializers.Serializer):
    """Documents the shape returned by the leaderboard service."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    logo = serializers.CharField()
    description = serializers.CharField()
    link = serializers.CharField()
    rating = serializers.FloatField()
    review_count = serializers.IntegerField()
    share_count = serializers.IntegerField()
    vendor = serializers.UUIDField(allow_null=True)
    is_approved = serializers.BooleanField()
    category = serializers.DictField(allow_null=True)
    weekly_shares = serializers.IntegerField()
    week_start = serializers.DateTimeField()
