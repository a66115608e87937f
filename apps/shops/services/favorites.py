"""Favorite shops of a user."""

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.shops.models import Shop


def toggle_favorite_shop(*, user: User, shop: Shop) -> bool:
    """
    Add the shop to the user's favorites, or remove it if already there.

    Returns:
        True if the shop is now a favorite
    """
    if user.favorites.filter(id=shop.id).exists():
        user.favorites.remove(shop)
        return False
    user.favorites.add(shop)
    return True


def list_favorite_shops(*, user: User) -> QuerySet:
    return user.favorites.select_related('category').order_by('name')
