"""Services for shops business logic."""

from .exceptions import (
    ShopsServiceError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCategoryNameError,
    ShopRequestNotFoundError,
    DuplicateReviewError,
)
from .category_management import create_category, update_category
from .shop_management import create_shop, update_shop
from .shop_requests import (
    submit_shop_request,
    approve_shop_request,
    reject_shop_request,
)
from .review_management import add_review, recalculate_shop_rating
from .favorites import toggle_favorite_shop, list_favorite_shops

__all__ = [
    # Exceptions
    'ShopsServiceError',
    'CategoryNotFoundError',
    'DuplicateCategoryError',
    'InvalidCategoryNameError',
    'ShopRequestNotFoundError',
    'DuplicateReviewError',
    # Categories
    'create_category',
    'update_category',
    # Shops
    'create_shop',
    'update_shop',
    # Shop requests
    'submit_shop_request',
    'approve_shop_request',
    'reject_shop_request',
    # Reviews
    'add_review',
    'recalculate_shop_rating',
    # Favorites
    'toggle_favorite_shop',
    'list_favorite_shops',
]
