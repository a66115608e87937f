from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import uuid


class Category(models.Model):
    """Shop and roll category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    icon = models.CharField(max_length=500, blank=True)
    color = models.CharField(max_length=20, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_categories',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name


class Shop(models.Model):
    """A vendor's shop. Only approved shops are publicly listed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    logo = models.URLField(max_length=500, blank=True)
    description = models.TextField(blank=True)
    link = models.URLField(max_length=500, blank=True)
    supported_countries = models.JSONField(default=list, blank=True)

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shops',
    )
    vendor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shops',
    )
    is_approved = models.BooleanField(default=False, db_index=True)

    location = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    language = models.CharField(max_length=10, blank=True)

    # Aggregates
    rating = models.FloatField(default=0)
    review_count = models.PositiveIntegerField(default=0)
    share_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shops'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_approved', 'category']),
            models.Index(fields=['is_approved', 'language']),
            models.Index(fields=['vendor']),
        ]

    def __str__(self):
        return self.name

    def is_owned_by(self, user):
        return bool(user and user.is_authenticated and self.vendor_id == user.id)


class ShopRequestStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    DECLINED = 'declined', 'Declined'


class ShopRequest(models.Model):
    """A vendor's application to open a shop, reviewed by an admin."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vendor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='shop_requests',
    )
    name = models.CharField(max_length=200)
    logo = models.URLField(max_length=500, blank=True)
    location = models.CharField(max_length=255, blank=True)
    country = models.CharField(max_length=100, blank=True)
    city = models.CharField(max_length=100, blank=True)
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shop_requests',
    )
    language = models.CharField(max_length=10, blank=True)
    description = models.TextField(blank=True)
    link = models.URLField(max_length=500, blank=True)
    supported_countries = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=10,
        choices=ShopRequestStatus.choices,
        default=ShopRequestStatus.PENDING,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'shop_requests'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.status})"


class Review(models.Model):
    """A user's rating of a shop. One per user per shop."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shop = models.ForeignKey(Shop, on_delete=models.CASCADE, related_name='reviews')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='shop_reviews',
    )
    user_name = models.CharField(max_length=100)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'shop_reviews'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['shop', 'user'], name='unique_shop_review_per_user'),
        ]

    def __str__(self):
        return f"{self.user_name} - {self.shop.name} ({self.rating}/5)"
