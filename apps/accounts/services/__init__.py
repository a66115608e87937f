"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    EmailAlreadyRegisteredError,
    InvalidVerificationCodeError,
    VerificationEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
)
from .email_verification import send_verification_code, consume_verification_code
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import delete_user_account

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'EmailAlreadyRegisteredError',
    'InvalidVerificationCodeError',
    'VerificationEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    # Services
    'send_verification_code',
    'consume_verification_code',
    'register_user',
    'authenticate_user',
    'delete_user_account',
]
