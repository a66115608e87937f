from django.conf import settings
from django.db import models
from django.db.models import Q
import uuid


class VendorProfile(models.Model):
    """
    Roll-credit account of a vendor (or admin).

    available_rolls is the single balance consumed by roll uploads and
    replenished by package purchases and share rewards.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='vendor_profile',
    )
    shop = models.ForeignKey(
        'shops.Shop',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vendor_profiles',
    )
    available_rolls = models.PositiveIntegerField(default=0)
    total_rolls_used = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'vendor_profiles'

    def __str__(self):
        return f"{self.user.email} ({self.available_rolls} rolls)"


class PackageSource(models.TextChoices):
    CATALOG = 'catalog', 'Catalog purchase'
    STORE = 'store', 'In-app store purchase'
    ADMIN = 'admin', 'Admin grant'


class RollPackage(models.Model):
    """A bundle of roll credits credited to a vendor profile."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vendor_profile = models.ForeignKey(
        VendorProfile,
        on_delete=models.CASCADE,
        related_name='packages',
    )
    package_type = models.CharField(max_length=10)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    rolls_included = models.PositiveIntegerField()
    bonus_rolls = models.PositiveIntegerField(default=0)
    source = models.CharField(
        max_length=10,
        choices=PackageSource.choices,
        default=PackageSource.CATALOG,
    )
    platform = models.CharField(max_length=10, blank=True)
    transaction_reference = models.CharField(max_length=500, blank=True, db_index=True)
    is_active = models.BooleanField(default=True)
    purchase_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'roll_packages'
        ordering = ['-purchase_date']
        indexes = [
            models.Index(fields=['vendor_profile', '-purchase_date']),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['transaction_reference'],
                condition=~Q(transaction_reference=''),
                name='unique_store_receipt',
            ),
        ]

    def __str__(self):
        return f"{self.package_type} package for {self.vendor_profile.user.email}"

    @property
    def total_rolls(self):
        return self.rolls_included + self.bonus_rolls


class SharePlatform(models.TextChoices):
    IOS = 'ios', 'iOS'
    ANDROID = 'android', 'Android'
    WEB = 'web', 'Web'


class ShareEvent(models.Model):
    """A rewarded app share, used to enforce the share cooldown."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='share_events',
    )
    device_id = models.CharField(max_length=255, db_index=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    platform = models.CharField(max_length=10, choices=SharePlatform.choices)
    verification_hash = models.CharField(max_length=64)
    verified = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'share_events'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.email} shared on {self.platform}"
