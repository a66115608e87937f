"""Domain exceptions for promotions app."""


class PromotionsServiceError(Exception):
    """Base exception for all promotions service errors."""
    pass


class PromotionPermissionError(PromotionsServiceError):
    """User may not manage promotions for this shop."""
    pass


class DuplicateCouponCodeError(PromotionsServiceError):
    """Coupon code is already in use."""
    pass


class InvalidAdLinkError(PromotionsServiceError):
    """Ad link does not match its link type."""
    pass
