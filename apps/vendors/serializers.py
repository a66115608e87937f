from rest_framework import serializers
from .models import VendorProfile, RollPackage, SharePlatform


# =============================================================================
# Output serializers
# =============================================================================

class RollPackageSerializer(serializers.ModelSerializer):
    total_rolls = serializers.IntegerField(read_only=True)

    class Meta:
        model = RollPackage
        fields = [
            'id',
            'package_type',
            'price',
            'rolls_included',
            'bonus_rolls',
            'total_rolls',
            'source',
            'platform',
            'is_active',
            'purchase_date',
        ]
        read_only_fields = fields


class VendorProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source='user.email', read_only=True)
    name = serializers.CharField(source='user.name', read_only=True)

    class Meta:
        model = VendorProfile
        fields = [
            'id',
            'email',
            'name',
            'shop',
            'available_rolls',
            'total_rolls_used',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DashboardShopSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    logo = serializers.CharField()
    is_approved = serializers.BooleanField()


class VendorDashboardSerializer(serializers.Serializer):
    profile = VendorProfileSerializer()
    shop = DashboardShopSerializer(allow_null=True)
    recent_packages = RollPackageSerializer(many=True)


class PackageCatalogEntrySerializer(serializers.Serializer):
    package_type = serializers.CharField()
    rolls = serializers.IntegerField()
    price = serializers.IntegerField()
    bonus_rolls = serializers.IntegerField()
    description = serializers.CharField()
    popular = serializers.BooleanField()


class ShareStatsSerializer(serializers.Serializer):
    available_rolls = serializers.IntegerField()
    total_shares = serializers.IntegerField()
    last_share_date = serializers.DateTimeField(allow_null=True)
    can_share_today = serializers.BooleanField()
    next_share_available = serializers.DateTimeField(allow_null=True)


# =============================================================================
# Input serializers
# =============================================================================

class PurchasePackageInputSerializer(serializers.Serializer):
    package_type = serializers.CharField(max_length=10)


class StorePurchaseInputSerializer(serializers.Serializer):
    platform = serializers.ChoiceField(choices=['ios', 'android'])
    product_id = serializers.CharField(max_length=100)
    receipt = serializers.CharField()


class GrantPackageInputSerializer(serializers.Serializer):
    vendor_profile_id = serializers.UUIDField()
    package_type = serializers.CharField(max_length=10)
    is_paid = serializers.BooleanField()


class RecordShareInputSerializer(serializers.Serializer):
    device_id = serializers.CharField(max_length=255)
    platform = serializers.ChoiceField(choices=SharePlatform.choices)
