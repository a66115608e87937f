"""
Roll creation and lifecycle.

Creating a roll consumes one of the vendor's roll credits in the same
transaction, so a failed insert never costs a credit and a missing
credit never leaves an orphan roll.
"""

import logging
from typing import Optional, Tuple

from django.core.cache import caches
from django.db import transaction
from django.db.models import F

from apps.accounts.models import User
from apps.shops.models import Shop
from apps.vendors.services import consume_roll_credit, link_shop_to_vendor
from apps.rolls.models import Roll, DEFAULT_ROLL_CATEGORY, DEFAULT_ROLL_DURATION
from .exceptions import (
    RollNotFoundError,
    ShopNotFoundError,
    ShopNotApprovedError,
    RollPermissionError,
)

logger = logging.getLogger(__name__)


def invalidate_feed_cache():
    caches['rolls'].clear()


def get_roll(*, roll_id) -> Roll:
    try:
        return Roll.objects.select_related('shop', 'created_by').get(id=roll_id)
    except Roll.DoesNotExist:
        raise RollNotFoundError("Roll not found")


@transaction.atomic
def create_roll(
    *,
    user: User,
    shop_id,
    video_url: str,
    caption: str = '',
    category: str = DEFAULT_ROLL_CATEGORY,
    duration: int = DEFAULT_ROLL_DURATION,
) -> Tuple[Roll, Optional[int]]:
    """
    Post a roll for a shop.

    Vendors may only post for their own approved shop and pay one roll
    credit. Admins may post for any shop for free.

    Args:
        user: Uploading user
        shop_id: Target shop UUID
        video_url: Public URL of the uploaded video
        caption: Optional caption
        category: Feed category (defaults to 'all')
        duration: Length in seconds

    Returns:
        Tuple of (roll, remaining credits or None for admins)

    Raises:
        RollPermissionError: Not a vendor/admin, or shop owned by someone else
        ShopNotFoundError: Shop does not exist
        ShopNotApprovedError: Vendor's shop is still pending approval
        NoRollsAvailableError: Vendor has no credits left
    """
    if not (user.is_vendor or user.is_admin):
        raise RollPermissionError("Only vendors and admins can create rolls")

    try:
        shop = Shop.objects.get(id=shop_id)
    except Shop.DoesNotExist:
        raise ShopNotFoundError("Shop not found")

    if not user.is_admin:
        if not shop.is_owned_by(user):
            raise RollPermissionError("You can only post rolls for your own shop")
        if not shop.is_approved:
            raise ShopNotApprovedError("Shop must be approved before posting rolls")

    profile = consume_roll_credit(user=user)

    roll = Roll.objects.create(
        shop=shop,
        video_url=video_url,
        caption=caption or '',
        category=category or DEFAULT_ROLL_CATEGORY,
        duration=duration or DEFAULT_ROLL_DURATION,
        created_by=user,
    )

    remaining = None
    if profile is not None:
        if profile.shop_id is None:
            link_shop_to_vendor(user=user, shop=shop)
        remaining = profile.available_rolls

    invalidate_feed_cache()
    logger.info("Roll %s created for shop %s by %s", roll.id, shop.name, user.email)
    return roll, remaining


def update_roll(*, roll: Roll, **fields) -> Roll:
    """Update caption, category or duration of a roll."""
    allowed = {'caption', 'category', 'duration'}
    changed = []
    for field, value in fields.items():
        if field in allowed:
            setattr(roll, field, value)
            changed.append(field)

    if changed:
        roll.save(update_fields=changed + ['updated_at'])
        invalidate_feed_cache()
    return roll


def delete_roll(*, roll: Roll) -> None:
    roll_id = roll.id
    roll.delete()
    invalidate_feed_cache()
    logger.info("Roll %s deleted", roll_id)


def list_shop_rolls(*, shop_id):
    return Roll.objects.filter(shop_id=shop_id).select_related('shop', 'created_by')


@transaction.atomic
def share_roll(*, roll_id) -> Roll:
    """Count a share of the roll and return it refreshed."""
    updated = Roll.objects.filter(id=roll_id).update(shares_count=F('shares_count') + 1)
    if not updated:
        raise RollNotFoundError("Roll not found")
    return get_roll(roll_id=roll_id)
