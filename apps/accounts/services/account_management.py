"""Account management service."""

import logging
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def delete_user_account(*, user_id: UUID) -> None:
    """
    Permanently delete a user and everything they own.

    Args:
        user_id: User's ID

    Raises:
        UserNotFoundError: If the user does not exist
    """
    deleted, _ = User.objects.filter(id=user_id).delete()
    if not deleted:
        raise UserNotFoundError("User not found")

    logger.info("Deleted user %s", user_id)

