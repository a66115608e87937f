"""Shop request workflow: vendors apply, admins approve or reject."""

import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.shops.models import Shop, ShopRequest, ShopRequestStatus
from apps.shops.localization import normalize_country_to_code
from apps.vendors.services import link_shop_to_vendor
from .exceptions import ShopRequestNotFoundError

logger = logging.getLogger(__name__)

COPIED_FIELDS = (
    'name',
    'logo',
    'location',
    'country',
    'city',
    'category',
    'language',
    'description',
    'link',
    'supported_countries',
)


def submit_shop_request(*, vendor: User, **fields) -> ShopRequest:
    """Create a pending shop request for a vendor."""
    if 'country' in fields:
        fields['country'] = normalize_country_to_code(fields['country']) or ''
    shop_request = ShopRequest.objects.create(vendor=vendor, **fields)
    logger.info("Shop request %s submitted by %s", shop_request.name, vendor.email)
    return shop_request


def _get_pending_request(request_id: UUID) -> ShopRequest:
    try:
        return (
            ShopRequest.objects
            .select_for_update()
            .select_related('vendor')
            .get(id=request_id, status=ShopRequestStatus.PENDING)
        )
    except ShopRequest.DoesNotExist:
        raise ShopRequestNotFoundError("Shop request not found")


@transaction.atomic
def approve_shop_request(*, request_id: UUID) -> Shop:
    """
    Turn a pending request into an approved shop.

    The vendor's profile is linked to the new shop and the request is
    removed.

    Raises:
        ShopRequestNotFoundError: If no pending request has this id
    """
    shop_request = _get_pending_request(request_id)

    shop = Shop.objects.create(
        vendor=shop_request.vendor,
        is_approved=True,
        **{field: getattr(shop_request, field) for field in COPIED_FIELDS},
    )
    link_shop_to_vendor(user=shop_request.vendor, shop=shop)
    shop_request.delete()

    logger.info("Shop request for %s approved, shop %s created", shop.name, shop.id)
    return shop


@transaction.atomic
def reject_shop_request(*, request_id: UUID) -> None:
    """
    Decline and remove a pending request.

    Raises:
        ShopRequestNotFoundError: If no pending request has this id
    """
    shop_request = _get_pending_request(request_id)
    logger.info("Shop request %s from %s rejected", shop_request.name, shop_request.vendor.email)
    shop_request.delete()
