"""Email verification code service."""

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import EmailVerification
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidVerificationCodeError,
    VerificationEmailError,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def generate_verification_code() -> str:
    """Return a random 6-digit numeric code."""
    return str(100000 + secrets.randbelow(900000))


def send_verification_code(*, email: str) -> EmailVerification:
    """
    Issue a fresh signup code for an email address and mail it.

    Any previous code for the same address is replaced.

    Args:
        email: Address to verify

    Returns:
        EmailVerification instance

    Raises:
        EmailAlreadyRegisteredError: If an account already uses this email
        VerificationEmailError: If the email could not be sent
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise EmailAlreadyRegisteredError("User already exists with this email")

    ttl = timedelta(minutes=settings.EMAIL_VERIFICATION_TTL_MINUTES)
    verification, _ = EmailVerification.objects.update_or_create(
        email=email,
        defaults={
            'code': generate_verification_code(),
            'expires_at': timezone.now() + ttl,
            'is_used': False,
        },
    )

    try:
        send_mail(
            subject='BigBag - Email Verification Code',
            message=(
                f"Your BigBag verification code is {verification.code}.\n\n"
                f"This code expires in {settings.EMAIL_VERIFICATION_TTL_MINUTES} minutes."
            ),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[email],
        )
    except Exception as e:
        logger.error("Failed to send verification email to %s: %s", email, e)
        raise VerificationEmailError(
            "Failed to send verification email. Please try again."
        ) from e

    logger.info("Verification code sent to %s", email)
    return verification


@transaction.atomic
def consume_verification_code(*, email: str, code: str) -> EmailVerification:
    """
    Mark a pending, unexpired code as used.

    Raises:
        InvalidVerificationCodeError: If no matching pending code exists
    """
    verification = (
        EmailVerification.objects
        .select_for_update()
        .filter(
            email=User.objects.normalize_email(email),
            code=code,
            is_used=False,
            expires_at__gt=timezone.now(),
        )
        .first()
    )
    if verification is None:
        raise InvalidVerificationCodeError("Invalid or expired verification code")

    verification.is_used = True
    verification.save(update_fields=['is_used'])
    return verification
