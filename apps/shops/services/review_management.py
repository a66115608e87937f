"""Shop review service."""

from django.db import transaction, IntegrityError
from django.db.models import Avg, Count

from apps.accounts.models import User
from apps.shops.models import Shop, Review
from .exceptions import DuplicateReviewError


def recalculate_shop_rating(shop: Shop) -> Shop:
    """Store the average rating (one decimal) and review count on the shop."""
    stats = shop.reviews.aggregate(avg=Avg('rating'), count=Count('id'))
    shop.rating = round(stats['avg'] or 0, 1)
    shop.review_count = stats['count']
    shop.save(update_fields=['rating', 'review_count', 'updated_at'])
    return shop


@transaction.atomic
def add_review(*, shop: Shop, user: User, rating: int, comment: str) -> Review:
    """
    Add a user's review to a shop and refresh the shop rating.

    Raises:
        DuplicateReviewError: If the user already reviewed this shop
    """
    if Review.objects.filter(shop=shop, user=user).exists():
        raise DuplicateReviewError("You have already reviewed this shop")

    try:
        with transaction.atomic():
            review = Review.objects.create(
                shop=shop,
                user=user,
                user_name=user.get_display_name(),
                rating=rating,
                comment=comment.strip(),
            )
    except IntegrityError:
        raise DuplicateReviewError("You have already reviewed this shop")

    recalculate_shop_rating(shop)
    return review
