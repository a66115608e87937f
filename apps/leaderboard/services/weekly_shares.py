"""
Weekly shop-share leaderboard.

Every shop share bumps the shop's lifetime ``share_count``. When the
sharer's country is known, a per-country counter for the current week
(starting Monday 00:00 UTC) is bumped as well. The leaderboard reads the
most recent week that has any shares in the requested country.
"""

import logging
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional

from django.conf import settings
from django.core.cache import caches
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.shops.localization import normalize_country_to_code
from apps.shops.models import Shop
from apps.leaderboard.models import WeeklyShopShare
from .exceptions import ShopNotFoundError, InvalidCountryError, CountryRequiredError

logger = logging.getLogger(__name__)

TOP_SHOPS_LIMIT = 10


def week_start(moment: Optional[datetime] = None) -> datetime:
    """Monday 00:00 UTC of the week containing ``moment`` (default: now)."""
    moment = (moment or timezone.now()).astimezone(dt_timezone.utc)
    monday = moment - timedelta(days=moment.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_country(*, user: Optional[User], country: Optional[str]) -> Optional[str]:
    """Authenticated users' account country wins over the supplied one."""
    if user is not None and user.is_authenticated:
        if user.country:
            return user.country
        logger.warning("User %s has no country set, using supplied country", user.email)
    return country


@transaction.atomic
def record_shop_share(*, shop_id, country: Optional[str] = None, user: Optional[User] = None) -> Shop:
    """
    Count a share of a shop.

    Args:
        shop_id: Shared shop UUID
        country: Country supplied by the client
        user: Sharing user, if authenticated

    Returns:
        Shop with the updated share_count

    Raises:
        ShopNotFoundError: If the shop does not exist
    """
    updated = Shop.objects.filter(id=shop_id).update(share_count=F('share_count') + 1)
    if not updated:
        raise ShopNotFoundError("Shop not found")

    country = resolve_country(user=user, country=country)
    country_code = normalize_country_to_code(country)

    if country_code:
        counter, _ = WeeklyShopShare.objects.get_or_create(
            shop_id=shop_id,
            country=country_code,
            week_start=week_start(),
        )
        WeeklyShopShare.objects.filter(id=counter.id).update(share_count=F('share_count') + 1)
        logger.debug("Weekly share recorded for shop %s in %s", shop_id, country_code)
    return Shop.objects.get(id=shop_id)


def leaderboard_country(*, user: Optional[User], country: Optional[str]) -> str:
    """
    Country the leaderboard is shown for.

    Authenticated users always see their account country; guests must
    pass one.

    Raises:
        CountryRequiredError: No usable country
        InvalidCountryError: Country is not recognised
    """
    if user is not None and user.is_authenticated:
        if not user.country:
            raise CountryRequiredError("User account has no country set. Please update your profile.")
        country = user.country
    elif not country:
        raise CountryRequiredError("Country parameter is required for guest users")

    country_code = normalize_country_to_code(country)
    if not country_code:
        raise InvalidCountryError("Invalid country format")
    return country_code


def _serialize_entry(entry: WeeklyShopShare) -> dict:
    shop = entry.shop
    return {
        'id': str(shop.id),
        'name': shop.name,
        'logo': shop.logo,
        'description': shop.description,
        'link': shop.link,
        'rating': shop.rating,
        'review_count': shop.review_count,
        'share_count': shop.share_count,
        'vendor': str(shop.vendor_id) if shop.vendor_id else None,
        'is_approved': shop.is_approved,
        'category': (
            {'id': str(shop.category.id), 'name': shop.category.name}
            if shop.category else None
        ),
        'weekly_shares': entry.share_count,
        'week_start': entry.week_start.isoformat(),
    }


def top_shared_shops(*, country_code: str, limit: int = TOP_SHOPS_LIMIT) -> list:
    """
    Most shared approved shops of the latest active week in a country.

    Results are cached per country for LEADERBOARD_CACHE_TTL seconds.

    Returns:
        List of shop dicts with ``weekly_shares``, highest first
    """
    cache_key = f'top-shared-shops:{country_code}'
    feed_cache = caches['feed']
    cached = feed_cache.get(cache_key)
    if cached is not None:
        return cached

    latest = (
        WeeklyShopShare.objects
        .filter(country=country_code, share_count__gt=0)
        .order_by('-week_start')
        .values_list('week_start', flat=True)
        .first()
    )
    if latest is None:
        return []

    entries = (
        WeeklyShopShare.objects
        .filter(
            country=country_code,
            week_start=latest,
            share_count__gt=0,
            shop__is_approved=True,
        )
        .select_related('shop', 'shop__category')
        .order_by('-share_count')[:limit]
    )
    shops = [_serialize_entry(entry) for entry in entries]

    feed_cache.set(cache_key, shops, settings.LEADERBOARD_CACHE_TTL)
    return shops
