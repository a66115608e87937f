"""Domain exceptions for shops app."""


class ShopsServiceError(Exception):
    """Base exception for all shops service errors."""
    pass


class CategoryNotFoundError(ShopsServiceError):
    """Category does not exist."""
    pass


class DuplicateCategoryError(ShopsServiceError):
    """A category with this name already exists."""
    pass


class InvalidCategoryNameError(ShopsServiceError):
    """Category name is empty after trimming."""
    pass


class ShopRequestNotFoundError(ShopsServiceError):
    """Shop request does not exist or was already handled."""
    pass


class DuplicateReviewError(ShopsServiceError):
    """User already reviewed this shop."""
    pass
