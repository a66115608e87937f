"""Services for vendor roll-credit accounting."""

from .exceptions import (
    VendorsServiceError,
    NotAVendorError,
    NoRollsAvailableError,
    InvalidPackageError,
    PaymentRequiredError,
    VendorProfileNotFoundError,
    ReceiptVerificationError,
    ReceiptAlreadyRedeemedError,
    ShareNotAllowedError,
    ShareCooldownError,
)
from .roll_credits import (
    get_or_create_vendor_profile,
    link_shop_to_vendor,
    get_vendor_dashboard,
    consume_roll_credit,
    spend_roll,
)
from .packages import (
    get_package,
    list_packages,
    credit_package,
    purchase_package,
    purchase_store_package,
    grant_package,
)
from .share_rewards import record_share, get_share_stats

__all__ = [
    # Exceptions
    'VendorsServiceError',
    'NotAVendorError',
    'NoRollsAvailableError',
    'InvalidPackageError',
    'PaymentRequiredError',
    'VendorProfileNotFoundError',
    'ReceiptVerificationError',
    'ReceiptAlreadyRedeemedError',
    'ShareNotAllowedError',
    'ShareCooldownError',
    # Roll credits
    'get_or_create_vendor_profile',
    'link_shop_to_vendor',
    'get_vendor_dashboard',
    'consume_roll_credit',
    'spend_roll',
    # Packages
    'get_package',
    'list_packages',
    'credit_package',
    'purchase_package',
    'purchase_store_package',
    'grant_package',
    # Share rewards
    'record_share',
    'get_share_stats',
]
