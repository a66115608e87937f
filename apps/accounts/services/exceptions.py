"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class EmailAlreadyRegisteredError(UserRegistrationError):
    """Raised when an account already exists for the email."""
    pass


class InvalidVerificationCodeError(AccountsServiceError):
    """Raised when the signup code is wrong, used or expired."""
    pass


class VerificationEmailError(AccountsServiceError):
    """Raised when the verification email cannot be delivered."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass
