"""Services for rolls business logic."""

from .exceptions import (
    RollsServiceError,
    RollNotFoundError,
    ShopNotFoundError,
    ShopNotApprovedError,
    RollPermissionError,
    AlreadyLikedError,
    NotLikedError,
    AlreadySavedError,
    NotSavedError,
    InvalidCommentError,
    CommentNotFoundError,
)
from .roll_management import (
    get_roll,
    create_roll,
    update_roll,
    delete_roll,
    list_shop_rolls,
    share_roll,
    invalidate_feed_cache,
)
from .feed import get_feed, interaction_flags, DEFAULT_FEED_LIMIT, MAX_FEED_LIMIT
from .interactions import (
    like_roll,
    unlike_roll,
    save_roll,
    unsave_roll,
    list_saved_rolls,
)
from .comments import (
    create_comment,
    list_comments,
    update_comment,
    delete_comment,
    like_comment,
    unlike_comment,
)

__all__ = [
    # Exceptions
    'RollsServiceError',
    'RollNotFoundError',
    'ShopNotFoundError',
    'ShopNotApprovedError',
    'RollPermissionError',
    'AlreadyLikedError',
    'NotLikedError',
    'AlreadySavedError',
    'NotSavedError',
    'InvalidCommentError',
    'CommentNotFoundError',
    # Rolls
    'get_roll',
    'create_roll',
    'update_roll',
    'delete_roll',
    'list_shop_rolls',
    'share_roll',
    'invalidate_feed_cache',
    # Feed
    'get_feed',
    'interaction_flags',
    'DEFAULT_FEED_LIMIT',
    'MAX_FEED_LIMIT',
    # Likes and saves
    'like_roll',
    'unlike_roll',
    'save_roll',
    'unsave_roll',
    'list_saved_rolls',
    # Comments
    'create_comment',
    'list_comments',
    'update_comment',
    'delete_comment',
    'like_comment',
    'unlike_comment',
]
