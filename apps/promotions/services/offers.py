"""Offer and coupon creation with shop-ownership rules."""

import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.shops.models import Shop
from apps.promotions.models import Offer, Coupon
from .exceptions import PromotionPermissionError, DuplicateCouponCodeError

logger = logging.getLogger(__name__)


def check_shop_ownership(*, user: User, shop: Shop) -> None:
    """
    Vendors may only promote their own shop; admins any shop.

    Raises:
        PromotionPermissionError: If the user may not promote this shop
    """
    if user.is_admin:
        return
    if not (user.is_vendor and shop.is_owned_by(user)):
        raise PromotionPermissionError("You can only create promotions for your own shop")


def create_offer(*, user: User, shop: Shop, **fields) -> Offer:
    check_shop_ownership(user=user, shop=shop)
    offer = Offer.objects.create(shop=shop, **fields)
    logger.info("Offer %s created for shop %s by %s", offer.id, shop.name, user.email)
    return offer


def create_coupon(*, user: User, shop: Shop, code: str, **fields) -> Coupon:
    """
    Create a coupon with a unique code.

    Raises:
        PromotionPermissionError: If the user may not promote this shop
        DuplicateCouponCodeError: If the code is taken
    """
    check_shop_ownership(user=user, shop=shop)

    code = code.strip()
    if Coupon.objects.filter(code__iexact=code).exists():
        raise DuplicateCouponCodeError("Coupon code already exists")

    try:
        with transaction.atomic():
            coupon = Coupon.objects.create(shop=shop, code=code, **fields)
    except IntegrityError:
        raise DuplicateCouponCodeError("Coupon code already exists")

    logger.info("Coupon %s created for shop %s by %s", code, shop.name, user.email)
    return coupon


def update_coupon(*, coupon: Coupon, **fields) -> Coupon:
    code = fields.pop('code', None)
    if code is not None:
        code = code.strip()
        if Coupon.objects.filter(code__iexact=code).exclude(id=coupon.id).exists():
            raise DuplicateCouponCodeError("Coupon code already exists")
        coupon.code = code

    for field, value in fields.items():
        setattr(coupon, field, value)
    coupon.save()
    return coupon


def active_coupons():
    """Coupons that have not expired yet."""
    return Coupon.objects.filter(expiry_date__gt=timezone.now()).select_related('shop')
