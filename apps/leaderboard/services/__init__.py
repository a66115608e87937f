"""Services for the weekly shop-share leaderboard."""

from .exceptions import (
    LeaderboardServiceError,
    ShopNotFoundError,
    InvalidCountryError,
    CountryRequiredError,
)
from .weekly_shares import (
    week_start,
    record_shop_share,
    leaderboard_country,
    top_shared_shops,
    TOP_SHOPS_LIMIT,
)

__all__ = [
    # Exceptions
    'LeaderboardServiceError',
    'ShopNotFoundError',
    'InvalidCountryError',
    'CountryRequiredError',
    # Weekly shares
    'week_start',
    'record_shop_share',
    'leaderboard_country',
    'top_shared_shops',
    'TOP_SHOPS_LIMIT',
]
