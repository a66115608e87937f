"""Domain exceptions for vendors app."""


class VendorsServiceError(Exception):
    """Base exception for all vendor service errors."""
    pass


class NotAVendorError(VendorsServiceError):
    """Operation requires a vendor (or admin) account."""
    pass


class NoRollsAvailableError(VendorsServiceError):
    """Vendor has no roll credits left."""
    pass


class InvalidPackageError(VendorsServiceError):
    """Unknown package type or store product id."""
    pass


class PaymentRequiredError(VendorsServiceError):
    """Package grant was not marked as paid."""
    pass


class VendorProfileNotFoundError(VendorsServiceError):
    """Vendor profile does not exist."""
    pass


class ReceiptVerificationError(VendorsServiceError):
    """Store receipt is invalid or could not be verified."""
    pass


class ReceiptAlreadyRedeemedError(VendorsServiceError):
    """Store receipt was already credited."""
    pass


class ShareNotAllowedError(VendorsServiceError):
    """Regular users cannot earn rolls by sharing."""
    pass


class ShareCooldownError(VendorsServiceError):
    """Device or IP already earned a roll within the cooldown window."""

    def __init__(self, message, next_share_available=None):
        super().__init__(message)
        self.next_share_available = next_share_available
