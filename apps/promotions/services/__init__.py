"""Services for offers, coupons and ads."""

from .exceptions import (
    PromotionsServiceError,
    PromotionPermissionError,
    DuplicateCouponCodeError,
    InvalidAdLinkError,
)
from .personalization import personalize, sort_priority, resolve_viewer_locale
from .offers import (
    check_shop_ownership,
    create_offer,
    create_coupon,
    update_coupon,
    active_coupons,
)
from .ads import validate_ad_link, create_ad, update_ad, list_active_ads, MAX_ACTIVE_ADS

__all__ = [
    # Exceptions
    'PromotionsServiceError',
    'PromotionPermissionError',
    'DuplicateCouponCodeError',
    'InvalidAdLinkError',
    # Personalisation
    'personalize',
    'sort_priority',
    'resolve_viewer_locale',
    # Offers and coupons
    'check_shop_ownership',
    'create_offer',
    'create_coupon',
    'update_coupon',
    'active_coupons',
    # Ads
    'validate_ad_link',
    'create_ad',
    'update_ad',
    'list_active_ads',
    'MAX_ACTIVE_ADS',
]
