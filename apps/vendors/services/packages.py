"""Roll package catalogue, purchases and admin grants."""

import hashlib
import logging
from decimal import Decimal
from uuid import UUID

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.accounts.models import User
from apps.vendors.models import VendorProfile, RollPackage, PackageSource
from .exceptions import (
    NotAVendorError,
    InvalidPackageError,
    PaymentRequiredError,
    VendorProfileNotFoundError,
    ReceiptVerificationError,
    ReceiptAlreadyRedeemedError,
)
from .roll_credits import get_or_create_vendor_profile
from .store_receipts import verify_store_receipt

logger = logging.getLogger(__name__)


def get_package(package_type: str) -> dict:
    """
    Look up a catalogue entry.

    Raises:
        InvalidPackageError: If the package type is unknown
    """
    try:
        package = settings.ROLL_PACKAGES[str(package_type)]
    except KeyError:
        raise InvalidPackageError(f"Invalid package type: {package_type}")
    return {'package_type': str(package_type), **package}


def list_packages() -> list[dict]:
    """Catalogue entries ordered by price."""
    return sorted(
        (get_package(package_type) for package_type in settings.ROLL_PACKAGES),
        key=lambda package: package['price'],
    )


def _ensure_vendor(user: User) -> None:
    if not (user.is_vendor or user.is_admin):
        raise NotAVendorError("Only vendors can purchase roll packages")


@transaction.atomic
def credit_package(
    *,
    profile_id: UUID,
    package_type: str,
    source: str,
    platform: str = '',
    transaction_reference: str = '',
) -> RollPackage:
    """
    Record a package and add its rolls plus bonus to the balance.

    Args:
        profile_id: VendorProfile to credit
        package_type: Catalogue key
        source: catalog, store or admin
        platform: ios/android for store purchases
        transaction_reference: Store receipt fingerprint

    Returns:
        Created RollPackage

    Raises:
        InvalidPackageError: If the package type is unknown
        VendorProfileNotFoundError: If the profile does not exist
        ReceiptAlreadyRedeemedError: If the receipt fingerprint was already credited
    """
    package = get_package(package_type)

    try:
        profile = VendorProfile.objects.select_for_update().get(id=profile_id)
    except VendorProfile.DoesNotExist:
        raise VendorProfileNotFoundError("Vendor profile not found")

    try:
        with transaction.atomic():
            roll_package = RollPackage.objects.create(
                vendor_profile=profile,
                package_type=package['package_type'],
                price=Decimal(str(package['price'])),
                rolls_included=package['rolls'],
                bonus_rolls=package['bonus_rolls'],
                source=source,
                platform=platform,
                transaction_reference=transaction_reference,
            )
    except IntegrityError:
        raise ReceiptAlreadyRedeemedError("This purchase has already been redeemed")

    profile.available_rolls += roll_package.total_rolls
    profile.save(update_fields=['available_rolls', 'updated_at'])

    logger.info(
        "Credited %d rolls (%s package, %s) to %s",
        roll_package.total_rolls, package_type, source, profile.user_id,
    )
    return roll_package


def purchase_package(*, user: User, package_type: str) -> RollPackage:
    """Buy a catalogue package for the current vendor."""
    _ensure_vendor(user)
    get_package(package_type)
    profile = get_or_create_vendor_profile(user=user)
    return credit_package(
        profile_id=profile.id,
        package_type=package_type,
        source=PackageSource.CATALOG,
    )


def receipt_fingerprint(receipt: str) -> str:
    return hashlib.sha256(receipt.encode('utf-8')).hexdigest()


def purchase_store_package(
    *,
    user: User,
    platform: str,
    product_id: str,
    receipt: str,
) -> RollPackage:
    """
    Credit a package bought through the App Store or Google Play.

    Args:
        user: Purchasing vendor
        platform: ios or android
        product_id: Store product id (com.bigbag.rolls.<type>)
        receipt: Receipt data (ios) or purchase token (android)

    Returns:
        Created RollPackage

    Raises:
        NotAVendorError: If the user is not a vendor or admin
        InvalidPackageError: If the product id is unknown
        ReceiptAlreadyRedeemedError: If the receipt was already credited
        ReceiptVerificationError: If the store rejects the receipt
    """
    _ensure_vendor(user)

    package_type = settings.STORE_PRODUCT_PACKAGES.get(product_id)
    if package_type is None:
        raise InvalidPackageError(f"Unknown product: {product_id}")

    reference = receipt_fingerprint(receipt)
    if RollPackage.objects.filter(transaction_reference=reference).exists():
        logger.warning("Receipt replay attempt by %s", user.email)
        raise ReceiptAlreadyRedeemedError("This purchase has already been redeemed")

    if not verify_store_receipt(platform=platform, product_id=product_id, receipt=receipt):
        raise ReceiptVerificationError("Invalid purchase")

    profile = get_or_create_vendor_profile(user=user)
    return credit_package(
        profile_id=profile.id,
        package_type=package_type,
        source=PackageSource.STORE,
                platform=platform,
        transaction_reference=reference,
    )


def grant_package(
    *,
    vendor_profile_id: UUID,
    package_type: str,
    is_paid: bool,
) -> RollPackage:
    """
    Admin credit of a package paid outside the app.

    Raises:
        PaymentRequiredError: If is_paid is false
    """
    if not is_paid:
        raise PaymentRequiredError("Package must be paid before it can be added")

    return credit_package(
        profile_id=vendor_profile_id,
        package_type=package_type,
        source=PackageSource.ADMIN,
    )
