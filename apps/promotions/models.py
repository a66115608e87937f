from django.conf import settings
from django.db import models
from django.utils import timezone
import uuid


class Offer(models.Model):
    """Time-limited sale announced by a shop."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shop = models.ForeignKey('shops.Shop', on_delete=models.CASCADE, related_name='offers')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    # Free-form display values, e.g. "20%" or "10 JOD"
    discount = models.CharField(max_length=50)
    original_price = models.CharField(max_length=50)
    sale_price = models.CharField(max_length=50)
    image = models.URLField(max_length=500, blank=True)
    expiry_date = models.DateTimeField()
    is_limited = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'offers'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['shop', '-created_at']),
        ]

    def __str__(self):
        return f"{self.title} ({self.shop.name})"


class Coupon(models.Model):
    """Redeemable discount code for a shop."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shop = models.ForeignKey('shops.Shop', on_delete=models.CASCADE, related_name='coupons')
    code = models.CharField(max_length=50, unique=True)
    description = models.TextField(blank=True)
    discount = models.CharField(max_length=50)
    image = models.URLField(max_length=500, blank=True)
    expiry_date = models.DateTimeField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'coupons'
        ordering = ['-created_at']

    def __str__(self):
        return self.code

    @property
    def is_expired(self) -> bool:
        return self.expiry_date <= timezone.now()


class AdLinkType(models.TextChoices):
    INTERNAL = 'internal', 'Internal'
    EXTERNAL = 'external', 'External'


class Ad(models.Model):
    """Promotional banner managed by admins."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    image = models.URLField(max_length=500)
    link_type = models.CharField(
        max_length=10,
        choices=AdLinkType.choices,
        default=AdLinkType.INTERNAL,
    )
    link_url = models.URLField(max_length=500, blank=True)
    shop = models.ForeignKey(
        'shops.Shop',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ads',
    )
    is_active = models.BooleanField(default=True)
    priority = models.IntegerField(default=1)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_ads',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ads'
        ordering = ['-priority', '-created_at']
        indexes = [
            models.Index(fields=['is_active', '-priority']),
        ]

    def __str__(self):
        return self.title
