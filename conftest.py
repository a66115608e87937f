import pytest
from django.core.cache import caches
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


def client_for(user):
    """Return an API client authenticated as ``user`` via JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture(autouse=True)
def clear_caches():
    """Listing caches are process-local and would leak between tests."""
    caches['feed'].clear()
    caches['rolls'].clear()
    caches['default'].clear()
    yield
    caches['feed'].clear()
    caches['rolls'].clear()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a regular user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        name='Test User',
        country='JO',
        language='en',
    )


@pytest.fixture
def other_user(db):
    """Create and return another regular user."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        name='Other User',
    )


@pytest.fixture
def vendor(db):
    """Create and return a vendor."""
    return User.objects.create_user(
        email='vendor@example.com',
        password='TestPass123!',
        name='Vendor',
        role=UserRole.VENDOR,
        country='JO',
    )


@pytest.fixture
def other_vendor(db):
    """Create and return a second vendor."""
    return User.objects.create_user(
        email='othervendor@example.com',
        password='TestPass123!',
        name='Other Vendor',
        role=UserRole.VENDOR,
    )


@pytest.fixture
def admin_user(db):
    """Create and return an admin."""
    return User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        name='Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def authenticated_client(user):
    """API client authenticated as the regular user."""
    return client_for(user)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def vendor_client(vendor):
    """API client authenticated as the vendor."""
    return client_for(vendor)


@pytest.fixture
def other_vendor_client(other_vendor):
    return client_for(other_vendor)


@pytest.fixture
def admin_client(admin_user):
    """API client authenticated as the admin."""
    return client_for(admin_user)
