"""Domain exceptions for leaderboard app."""


class LeaderboardServiceError(Exception):
    """Base exception for all leaderboard service errors."""
    pass


class ShopNotFoundError(LeaderboardServiceError):
    """Shared shop does not exist."""
    pass


class InvalidCountryError(LeaderboardServiceError):
    """Country could not be resolved to a known country code."""
    pass


class CountryRequiredError(LeaderboardServiceError):
    """No country was supplied and none is set on the account."""
    pass
