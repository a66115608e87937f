"""
Roll-credit accounting.

Every vendor owns a single VendorProfile balance. Uploading a roll
consumes one credit, packages and share rewards add credits. Balance
changes always happen under a row lock on the profile so concurrent
uploads cannot overdraw it.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import transaction

from apps.accounts.models import User
from apps.shops.models import Shop
from apps.vendors.models import VendorProfile
from .exceptions import NotAVendorError, NoRollsAvailableError

logger = logging.getLogger(__name__)


def initial_roll_allocation(role: str) -> int:
    return settings.ROLL_ALLOCATION.get(role, 0)


def get_or_create_vendor_profile(*, user: User) -> VendorProfile:
    """
    Return the user's vendor profile, creating it on first use.

    New profiles are seeded with the role's initial roll allocation.
    """
    profile, created = VendorProfile.objects.get_or_create(
        user=user,
        defaults={'available_rolls': initial_roll_allocation(user.role)},
    )
    if created:
        logger.info(
            "Created vendor profile for %s with %d rolls",
            user.email, profile.available_rolls,
        )
    return profile


def link_shop_to_vendor(*, user: User, shop: Shop) -> VendorProfile:
    """Point the user's vendor profile at the given shop."""
    profile = get_or_create_vendor_profile(user=user)
    if profile.shop_id != shop.id:
        profile.shop = shop
        profile.save(update_fields=['shop', 'updated_at'])
    return profile


def get_vendor_dashboard(*, user: User) -> dict:
    """
    Collect the vendor's balance, linked shop and recent packages.

    When the profile has no linked shop but the vendor owns an approved
    one, the profile is re-linked to it.

    Returns:
        Dict with profile, shop and recent_packages (five newest)
    """
    if not (user.is_vendor or user.is_admin):
        raise NotAVendorError("Only vendors have a vendor profile")

    profile = get_or_create_vendor_profile(user=user)

    approved_shop = (
        Shop.objects
        .filter(vendor=user, is_approved=True)
        .order_by('created_at')
        .first()
    )
    if approved_shop and (profile.shop is None or not profile.shop.is_approved):
        profile = link_shop_to_vendor(user=user, shop=approved_shop)

    return {
        'profile': profile,
        'shop': profile.shop if profile.shop and profile.shop.is_approved else None,
        'recent_packages': list(profile.packages.all()[:5]),
    }


@transaction.atomic
def consume_roll_credit(*, user: User) -> Optional[VendorProfile]:
    """
    Take one roll credit from the vendor's balance.

    Admins upload without spending credits.

    Args:
        user: Uploading user

    Returns:
        Updated VendorProfile, or None for admins

    Raises:
        NotAVendorError: If the user is neither vendor nor admin
        NoRollsAvailableError: If the balance is zero
    """
    if user.is_admin:
        return None
    if not user.is_vendor:
        raise NotAVendorError("Only vendors can upload rolls")

    get_or_create_vendor_profile(user=user)
    profile = VendorProfile.objects.select_for_update().get(user=user)

    if profile.available_rolls <= 0:
        logger.warning("Vendor %s tried to upload with no rolls left", user.email)
        raise NoRollsAvailableError(
            "No available rolls. Purchase a package or share the app to earn free rolls."
        )

    profile.available_rolls -= 1
    profile.total_rolls_used += 1
    profile.save(update_fields=['available_rolls', 'total_rolls_used', 'updated_at'])

    logger.info(
        "Vendor %s consumed a roll credit, %d left",
        user.email, profile.available_rolls,
    )
    return profile


def spend_roll(*, user: User) -> VendorProfile:
    """Explicitly spend one roll credit and return the profile."""
    profile = consume_roll_credit(user=user)
    if profile is None:
        profile = get_or_create_vendor_profile(user=user)
    return profile
