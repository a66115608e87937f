import pytest
from datetime import timedelta
from django.utils import timezone
from apps.accounts.models import User, EmailVerification


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def pending_code(db):
    """A valid, unused signup code for newuser@example.com."""
    return EmailVerification.objects.create(
        email='newuser@example.com',
        code='123456',
        expires_at=timezone.now() + timedelta(minutes=10),
    )


@pytest.fixture
def expired_code(db):
    """An expired signup code for late@example.com."""
    return EmailVerification.objects.create(
        email='late@example.com',
        code='654321',
        expires_at=timezone.now() - timedelta(minutes=1),
    )


@pytest.fixture
def registration_data(pending_code):
    return {
        'email': pending_code.email,
        'verification_code': pending_code.code,
        'password': 'SecurePass123!',
        'name': 'New User',
        'country': 'JO',
        'city': 'Amman',
        'language': 'ar',
    }
