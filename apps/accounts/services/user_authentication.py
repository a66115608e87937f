"""Email/password sign-in."""

import logging

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Sign a user in and stamp ``last_login``.

    Emails are matched case-insensitively. Unknown emails and wrong
    passwords produce the same error.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Account has been deactivated
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=(email or '').strip())
        .first()
    )
    if user is None or not user.check_password(password):
        logger.warning("Failed sign-in attempt for %s", email)
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    logger.info("User %s signed in", user.email)
    return user
