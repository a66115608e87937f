"""User registration service."""

import logging
from typing import Optional

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole
from apps.vendors.services import get_or_create_vendor_profile
from .email_verification import consume_verification_code
from .exceptions import EmailAlreadyRegisteredError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    verification_code: str,
    password: str,
    role: str = UserRole.USER,
    name: str = "",
    age: Optional[int] = None,
    gender: str = "",
    country: str = "",
    city: str = "",
    language: str = "en",
) -> User:
    """
    Register a new user against a previously issued email code.

    Vendor and admin accounts get a vendor profile seeded with the
    role's initial roll allocation.

    Args:
        email: User's email address
        verification_code: 6-digit code sent by send_verification_code
        password: User's password (will be hashed)
        role: user, vendor or admin
        name: Display name
        age: Optional age
        gender: male or female
        country: Country code or name
        city: City
        language: Preferred language code

    Returns:
        Created User instance

    Raises:
        InvalidVerificationCodeError: If the code is wrong, used or expired
        EmailAlreadyRegisteredError: If the email is already taken
    """
    consume_verification_code(email=email, code=verification_code)

    if User.objects.filter(email__iexact=email).exists():
        raise EmailAlreadyRegisteredError("User already exists")

    user = User.objects.create_user(
        email=email,
        password=password,
        role=role,
        name=name,
        age=age,
        gender=gender,
        country=country,
        city=city,
        language=language,
    )

    if role in (UserRole.VENDOR, UserRole.ADMIN):
        get_or_create_vendor_profile(user=user)

    logger.info("Registered %s account %s", role, user.email)
    return user
