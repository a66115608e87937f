"""
Personalised ordering for offers, coupons and ads.

Items are ranked by how well their shop matches the viewer:

    1  favourite shop, same country and language
    2  favourite shop, same country
    3  favourite shop, same language
    4  favourite shop
    5  same country and language
    6  same country
    7  same language
    8  no match

Ties are broken by newest first.
"""

from typing import Callable, Iterable, Optional

from apps.accounts.models import User
from apps.shops.localization import normalize_country_to_code

NO_MATCH_PRIORITY = 8


def resolve_viewer_locale(*, user: Optional[User], country: Optional[str], language: Optional[str]):
    """
    Query values win; authenticated users fall back to their profile.

    Returns:
        Tuple of (country code or None, language or None)
    """
    if user is not None and user.is_authenticated:
        country = country or user.country
        language = language or user.language
    return normalize_country_to_code(country) if country else None, language or None


def favorite_shop_ids(user: Optional[User]) -> set:
    if user is None or not user.is_authenticated:
        return set()
    return set(user.favorites.values_list('id', flat=True))


def sort_priority(*, shop, favorites: set, country: Optional[str], language: Optional[str]) -> int:
    if shop is None:
        return NO_MATCH_PRIORITY

    is_favorite = shop.id in favorites
    matches_country = bool(country) and normalize_country_to_code(shop.country) == country
    matches_language = bool(language) and shop.language == language

    if is_favorite and matches_country and matches_language:
        return 1
    if is_favorite and matches_country:
        return 2
    if is_favorite and matches_language:
        return 3
    if is_favorite:
        return 4
    if matches_country and matches_language:
        return 5
    if matches_country:
        return 6
    if matches_language:
        return 7
    return NO_MATCH_PRIORITY


def personalize(
    items: Iterable,
    *,
    user: Optional[User] = None,
    country: Optional[str] = None,
    language: Optional[str] = None,
    shop_of: Callable = lambda item: item.shop,
) -> list:
    """
    Sort items by personalised priority, newest first within a priority.

    Args:
        items: Objects with ``created_at`` and a shop
        user: Viewer (may be anonymous or None)
        country: Requested country, falls back to the user's country
        language: Requested language, falls back to the user's language
        shop_of: Returns the shop of an item

    Returns:
        New sorted list
    """
    country, language = resolve_viewer_locale(user=user, country=country, language=language)
    favorites = favorite_shop_ids(user)

    items = sorted(items, key=lambda item: item.created_at, reverse=True)
    return sorted(
        items,
        key=lambda item: sort_priority(
            shop=shop_of(item),
            favorites=favorites,
            country=country,
            language=language,
        ),
    )
