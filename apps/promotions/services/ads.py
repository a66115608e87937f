"""Ad management and the public ad listing."""

import logging
from typing import Optional

from apps.accounts.models import User
from apps.promotions.models import Ad, AdLinkType
from .exceptions import InvalidAdLinkError
from .personalization import personalize

logger = logging.getLogger(__name__)

MAX_ACTIVE_ADS = 20


def validate_ad_link(*, link_type: str, link_url: str = '') -> None:
    """
    External ads need a URL to open.

    Raises:
        InvalidAdLinkError: If the link does not fit the link type
    """
    if link_type == AdLinkType.EXTERNAL and not link_url:
        raise InvalidAdLinkError("External ads require a link URL")


def create_ad(*, created_by: User, **fields) -> Ad:
    validate_ad_link(
        link_type=fields.get('link_type', AdLinkType.INTERNAL),
        link_url=fields.get('link_url', ''),
    )
    ad = Ad.objects.create(created_by=created_by, **fields)
    logger.info("Ad %s created by %s", ad.id, created_by.email)
    return ad


def update_ad(*, ad: Ad, **fields) -> Ad:
    for field, value in fields.items():
        setattr(ad, field, value)
    validate_ad_link(link_type=ad.link_type, link_url=ad.link_url)
    ad.save()
    return ad


def list_active_ads(
    *,
    user: Optional[User] = None,
    country: Optional[str] = None,
    language: Optional[str] = None,
) -> list:
    """
    Active ads for the viewer.

    The personalised top MAX_ACTIVE_ADS are picked first and then shown
    by priority (highest first), newest first within a priority.
    """
    ads = Ad.objects.filter(is_active=True).select_related('shop')
    top = personalize(ads, user=user, country=country, language=language)[:MAX_ACTIVE_ADS]
    top.sort(key=lambda ad: ad.created_at, reverse=True)
    top.sort(key=lambda ad: ad.priority, reverse=True)
    return top
