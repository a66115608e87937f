"""Share-to-earn: vendors earn a roll credit for sharing the app once a day."""

import hashlib
import logging
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from apps.accounts.models import User
from apps.vendors.models import VendorProfile, ShareEvent
from .exceptions import ShareNotAllowedError, ShareCooldownError
from .roll_credits import get_or_create_vendor_profile

logger = logging.getLogger(__name__)

SHARE_REWARD_ROLLS = 1


def share_cooldown() -> timedelta:
    return timedelta(hours=settings.SHARE_COOLDOWN_HOURS)


def build_verification_hash(*, user_id, device_id: str, platform: str, timestamp) -> str:
    raw = f"{user_id}-{device_id}-{platform}-{int(timestamp.timestamp() * 1000)}"
    return hashlib.sha256(raw.encode('utf-8')).hexdigest()


@transaction.atomic
def record_share(
    *,
    user: User,
    device_id: str,
    platform: str,
    ip_address: Optional[str] = None,
) -> VendorProfile:
    """
    Reward a vendor with one roll credit for sharing the app.

    Only one reward per device or IP address is granted within the
    cooldown window.

    Args:
        user: Sharing user
        device_id: Client device identifier
        platform: ios, android or web
        ip_address: Request IP address

    Returns:
        Updated VendorProfile

    Raises:
        ShareNotAllowedError: If the user has the regular user role
        ShareCooldownError: If the device or IP was rewarded recently
    """
    if not (user.is_vendor or user.is_admin):
        raise ShareNotAllowedError("Regular users cannot earn rolls through sharing")

    # Serialize concurrent shares of the same user on the user row
    user = User.objects.select_for_update().get(id=user.id)

    now = timezone.now()
    matches_source = Q(device_id=device_id)
    if ip_address:
        matches_source |= Q(ip_address=ip_address)
    recent = (
        ShareEvent.objects
        .filter(user=user, created_at__gt=now - share_cooldown())
        .filter(matches_source)
        .order_by('created_at')
        .first()
    )
    if recent is not None:
        raise ShareCooldownError(
            "You can only earn rolls once per day per device",
            next_share_available=recent.created_at + share_cooldown(),
        )

    ShareEvent.objects.create(
        user=user,
        device_id=device_id,
        ip_address=ip_address,
        platform=platform,
        verification_hash=build_verification_hash(
            user_id=user.id, device_id=device_id, platform=platform, timestamp=now,
        ),
        verified=True,
    )

    get_or_create_vendor_profile(user=user)
    profile = VendorProfile.objects.select_for_update().get(user=user)
    profile.available_rolls += SHARE_REWARD_ROLLS
    profile.save(update_fields=['available_rolls', 'updated_at'])

    user.total_shares += 1
    user.last_share_date = now
    user.save(update_fields=['total_shares', 'last_share_date'])

    logger.info("Share reward granted to %s via %s", user.email, platform)
    return profile


def get_share_stats(*, user: User) -> dict:
    """Balance and share-cooldown status for the user."""
    profile = VendorProfile.objects.filter(user=user).first()
    now = timezone.now()

    last_event = ShareEvent.objects.filter(user=user).order_by('-created_at').first()
    can_share_today = last_event is None or last_event.created_at <= now - share_cooldown()

    return {
        'available_rolls': profile.available_rolls if profile else 0,
        'total_shares': user.total_shares,
        'last_share_date': user.last_share_date,
        'can_share_today': can_share_today,
        'next_share_available': None if can_share_today else last_event.created_at + share_cooldown(),
    }
