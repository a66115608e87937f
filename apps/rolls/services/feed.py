"""Cursor-paginated roll feed."""

from datetime import datetime
from typing import Optional

from apps.accounts.models import User
from apps.rolls.models import Roll, SavedRoll, DEFAULT_ROLL_CATEGORY

DEFAULT_FEED_LIMIT = 20
MAX_FEED_LIMIT = 100


def interaction_flags(*, user: Optional[User], roll_ids) -> tuple:
    """
    Return (liked_ids, saved_ids) for the given rolls.

    Anonymous users get empty sets.
    """
    if user is None or not user.is_authenticated or not roll_ids:
        return set(), set()

    liked_ids = set(
        user.liked_rolls.filter(id__in=roll_ids).values_list('id', flat=True)
    )
    saved_ids = set(
        SavedRoll.objects
        .filter(user=user, roll_id__in=roll_ids)
        .values_list('roll_id', flat=True)
    )
    return liked_ids, saved_ids


def get_feed(
    *,
    user: Optional[User] = None,
    category: Optional[str] = None,
    cursor: Optional[datetime] = None,
    limit: int = DEFAULT_FEED_LIMIT,
) -> dict:
    """
    Newest-first page of rolls.

    Args:
        user: Requesting user (for is_liked / is_saved), may be anonymous
        category: Only rolls in this category; 'all' or empty means no filter
        cursor: Only rolls created strictly before this moment
        limit: Page size, clamped to 1..MAX_FEED_LIMIT

    Returns:
        Dict with rolls, liked_ids, saved_ids, next_cursor and has_more
    """
    limit = max(1, min(limit or DEFAULT_FEED_LIMIT, MAX_FEED_LIMIT))

    queryset = Roll.objects.select_related('shop', 'created_by').order_by('-created_at')
    if category and category != DEFAULT_ROLL_CATEGORY:
        queryset = queryset.filter(category=category)
    if cursor is not None:
        queryset = queryset.filter(created_at__lt=cursor)

    rolls = list(queryset[:limit])
    liked_ids, saved_ids = interaction_flags(user=user, roll_ids=[r.id for r in rolls])

    return {
        'rolls': rolls,
        'liked_ids': liked_ids,
        'saved_ids': saved_ids,
        'next_cursor': rolls[-1].created_at if rolls else None,
        'has_more': len(rolls) == limit,
    }
