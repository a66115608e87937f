from rest_framework import serializers
from apps.shops.models import Shop
from apps.shops.serializers import ShopSummarySerializer
from .models import Offer, Coupon, Ad


class OfferSerializer(serializers.ModelSerializer):
    shop = ShopSummarySerializer(read_only=True)
    shop_id = serializers.PrimaryKeyRelatedField(
        queryset=Shop.objects.all(),
        source='shop',
        write_only=True,
    )

    class Meta:
        model = Offer
        fields = [
            'id',
            'shop',
            'shop_id',
            'title',
            'description',
            'discount',
            'original_price',
            'sale_price',
            'image',
            'expiry_date',
            'is_limited',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class CouponSerializer(serializers.ModelSerializer):
    shop = ShopSummarySerializer(read_only=True)
    shop_id = serializers.PrimaryKeyRelatedField(
        queryset=Shop.objects.all(),
        source='shop',
        write_only=True,
    )
    is_expired = serializers.BooleanField(read_only=True)

    class Meta:
        model = Coupon
        fields = [
            'id',
            'shop',
            'shop_id',
            'code',
            'description',
            'discount',
            'image',
            'expiry_date',
            'is_expired',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            # Uniqueness is checked case-insensitively by the service
            'code': {'validators': []},
        }


class AdSerializer(serializers.ModelSerializer):
    shop = ShopSummarySerializer(read_only=True)
    shop_id = serializers.PrimaryKeyRelatedField(
        queryset=Shop.objects.all(),
        source='shop',
        write_only=True,
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Ad
        fields = [
            'id',
            'title',
            'image',
            'link_type',
            'link_url',
            'shop',
            'shop_id',
            'is_active',
            'priority',
            'created_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']


class LocaleQuerySerializer(serializers.Serializer):
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)
    language = serializers.CharField(required=False, allow_blank=True, max_length=10)
