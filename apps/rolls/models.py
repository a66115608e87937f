from django.conf import settings
from django.db import models
import uuid


DEFAULT_ROLL_CATEGORY = 'all'
DEFAULT_ROLL_DURATION = 30


class Roll(models.Model):
    """Short-form video posted for a shop."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shop = models.ForeignKey('shops.Shop', on_delete=models.CASCADE, related_name='rolls')
    video_url = models.URLField(max_length=500)
    caption = models.TextField(blank=True)
    category = models.CharField(max_length=100, default=DEFAULT_ROLL_CATEGORY, db_index=True)
    duration = models.PositiveIntegerField(default=DEFAULT_ROLL_DURATION, help_text='Seconds')

    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='liked_rolls',
        blank=True,
    )

    # Denormalized counters
    likes_count = models.PositiveIntegerField(default=0)
    comments_count = models.PositiveIntegerField(default=0)
    saves_count = models.PositiveIntegerField(default=0)
    shares_count = models.PositiveIntegerField(default=0)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_rolls',
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rolls'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category', '-created_at']),
            models.Index(fields=['shop', '-created_at']),
        ]

    def __str__(self):
        return f"Roll {self.id} ({self.shop.name})"


class Comment(models.Model):
    """A user's comment on a roll."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    roll = models.ForeignKey(Roll, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='roll_comments',
    )
    comment = models.TextField()
    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='liked_comments',
        blank=True,
    )
    likes_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'roll_comments'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['roll', '-created_at']),
        ]

    def __str__(self):
        return f"{self.user.email} on {self.roll_id}"


class SavedRoll(models.Model):
    """A roll bookmarked by a user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='saved_rolls',
    )
    roll = models.ForeignKey(Roll, on_delete=models.CASCADE, related_name='saves')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'saved_rolls'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'roll'], name='unique_saved_roll_per_user'),
        ]

    def __str__(self):
        return f"{self.user.email} saved {self.roll_id}"
