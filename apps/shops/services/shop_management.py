"""Shop management service - creation, updates and approval state."""

import logging

from django.db import transaction

from apps.accounts.models import User
from apps.shops.models import Shop
from apps.shops.localization import normalize_country_to_code
from apps.vendors.services import link_shop_to_vendor

logger = logging.getLogger(__name__)

ADMIN_ONLY_FIELDS = ('is_approved', 'vendor')


@transaction.atomic
def create_shop(*, created_by: User, **fields) -> Shop:
    """
    Create a shop.

    Shops created by vendors start unapproved and belong to the vendor.
    Shops created by admins are approved immediately; an admin may assign
    them to a vendor, whose profile is then linked to the shop.

    Args:
        created_by: Vendor or admin creating the shop
        **fields: Shop model fields

    Returns:
        Created Shop instance
    """
    if 'country' in fields:
        fields['country'] = normalize_country_to_code(fields['country']) or ''

    if created_by.is_admin:
        fields.setdefault('vendor', None)
        shop = Shop.objects.create(is_approved=True, **fields)
    else:
        for field in ADMIN_ONLY_FIELDS:
            fields.pop(field, None)
        shop = Shop.objects.create(vendor=created_by, is_approved=False, **fields)

    if shop.is_approved and shop.vendor is not None:
        link_shop_to_vendor(user=shop.vendor, shop=shop)

    logger.info(
        "Shop %s created by %s (approved=%s)",
        shop.name, created_by.email, shop.is_approved,
    )
    return shop


@transaction.atomic
def update_shop(*, shop: Shop, updated_by: User, **fields) -> Shop:
    """
    Update a shop. Only admins may change approval state or owner.

    Returns:
        Updated Shop instance
    """
    if not updated_by.is_admin:
        for field in ADMIN_ONLY_FIELDS:
            fields.pop(field, None)

    if 'country' in fields:
        fields['country'] = normalize_country_to_code(fields['country']) or ''

    for field, value in fields.items():
        setattr(shop, field, value)
    shop.save()

    if shop.is_approved and shop.vendor is not None:
        link_shop_to_vendor(user=shop.vendor, shop=shop)

    return shop
