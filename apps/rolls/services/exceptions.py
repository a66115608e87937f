"""Domain exceptions for rolls app."""


class RollsServiceError(Exception):
    """Base exception for all rolls service errors."""
    pass


class RollNotFoundError(RollsServiceError):
    """Roll does not exist."""
    pass


class ShopNotFoundError(RollsServiceError):
    """Shop referenced by a roll does not exist."""
    pass


class ShopNotApprovedError(RollsServiceError):
    """Rolls can only be posted for approved shops."""
    pass


class RollPermissionError(RollsServiceError):
    """User may not post or modify this roll."""
    pass


class AlreadyLikedError(RollsServiceError):
    """User already liked this roll or comment."""
    pass


class NotLikedError(RollsServiceError):
    """User has not liked this roll or comment."""
    pass


class AlreadySavedError(RollsServiceError):
    """User already saved this roll."""
    pass


class NotSavedError(RollsServiceError):
    """User has not saved this roll."""
    pass


class InvalidCommentError(RollsServiceError):
    """Comment text is empty."""
    pass


class CommentNotFoundError(RollsServiceError):
    """Comment does not exist."""
    pass
