from rest_framework import serializers
from .models import Category, Shop, ShopRequest, Review


# =============================================================================
# Categories
# =============================================================================

class CategorySerializer(serializers.ModelSerializer):

    class Meta:
        model = Category
        fields = ['id', 'name', 'icon', 'color', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            # Uniqueness is checked case-insensitively by the service
            'name': {'validators': []},
        }


class CategorySummarySerializer(serializers.ModelSerializer):

    class Meta:
        model = Category
        fields = ['id', 'name']
        read_only_fields = fields


# =============================================================================
# Shops
# =============================================================================

class ShopSerializer(serializers.ModelSerializer):
    """Full shop representation."""

    category = CategorySummarySerializer(read_only=True)

    class Meta:
        model = Shop
        fields = [
            'id',
            'name',
            'logo',
            'description',
            'link',
            'supported_countries',
            'category',
            'vendor',
            'is_approved',
            'location',
            'city',
            'country',
            'language',
            'rating',
            'review_count',
            'share_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ShopSummarySerializer(serializers.ModelSerializer):
    """Compact shop info embedded in rolls, offers and coupons."""

    class Meta:
        model = Shop
        fields = ['id', 'name', 'logo', 'country', 'language']
        read_only_fields = fields


class ShopWriteSerializer(serializers.ModelSerializer):
    """Input serializer for creating and updating shops."""

    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Shop
        fields = [
            'name',
            'logo',
            'description',
            'link',
            'supported_countries',
            'category',
            'vendor',
            'is_approved',
            'location',
            'city',
            'country',
            'language',
        ]
        extra_kwargs = {
            'vendor': {'required': False},
            'is_approved': {'required': False},
        }

    def validate_supported_countries(self, value):
        if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
            raise serializers.ValidationError('Must be a list of country codes.')
        return value


class ShopListQuerySerializer(serializers.Serializer):
    """Validates query parameters for the public shop listing."""

    category = serializers.UUIDField(required=False)
    language = serializers.CharField(required=False, max_length=10)
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100, default=20)


# =============================================================================
# Shop requests
# =============================================================================

class ShopRequestSerializer(serializers.ModelSerializer):
    vendor_email = serializers.EmailField(source='vendor.email', read_only=True)
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = ShopRequest
        fields = [
            'id',
            'vendor',
            'vendor_email',
            'name',
            'logo',
            'location',
            'country',
            'city',
            'category',
            'language',
            'description',
            'link',
            'supported_countries',
            'status',
            'created_at',
        ]
        read_only_fields = ['id', 'vendor', 'vendor_email', 'status', 'created_at']


# =============================================================================
# Reviews
# =============================================================================

class ReviewSerializer(serializers.ModelSerializer):

    class Meta:
        model = Review
        fields = ['id', 'shop', 'user', 'user_name', 'rating', 'comment', 'created_at']
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(max_length=2000)


# =============================================================================
# Reference data
# =============================================================================

class CountrySerializer(serializers.Serializer):
    code = serializers.CharField()
    name = serializers.CharField()


class LanguageSerializer(serializers.Serializer):
    code = serializers.CharField()
    name = serializers.CharField()
    native_name = serializers.CharField()
