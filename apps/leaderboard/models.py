from django.db import models
import uuid


class WeeklyShopShare(models.Model):
    """Number of times a shop was shared in a country during one week."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shop = models.ForeignKey('shops.Shop', on_delete=models.CASCADE, related_name='weekly_shares')
    country = models.CharField(max_length=100)
    # Monday 00:00 UTC
    week_start = models.DateTimeField()
    share_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'weekly_shop_shares'
        ordering = ['-week_start', '-share_count']
        constraints = [
            models.UniqueConstraint(
                fields=['shop', 'country', 'week_start'],
                name='unique_weekly_share_per_shop_country',
            ),
        ]
        indexes = [
            models.Index(fields=['country', '-week_start', '-share_count']),
        ]

    def __str__(self):
        return f"{self.shop.name} {self.country} {self.week_start:%Y-%m-%d}: {self.share_count}"
