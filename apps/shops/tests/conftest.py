import pytest
from apps.shops.models import Category, Shop, ShopRequest


@pytest.fixture
def category(db):
    """Create and return an active category."""
    return Category.objects.create(name='Fashion', icon='shirt', color='#ff0000')


@pytest.fixture
def inactive_category(db):
    return Category.objects.create(name='Archived', is_active=False)


@pytest.fixture
def shop(db, vendor, category):
    """Approved shop owned by the vendor."""
    return Shop.objects.create(
        name='Vendor Shop',
        description='Clothes and shoes',
        category=category,
        vendor=vendor,
        is_approved=True,
        country='JO',
        language='en',
    )


@pytest.fixture
def pending_shop(db, vendor, category):
    """Unapproved shop owned by the vendor."""
    return Shop.objects.create(
        name='Pending Shop',
        category=category,
        vendor=vendor,
        is_approved=False,
        language='ar',
    )


@pytest.fixture
def other_shop(db, other_vendor):
    """Approved shop owned by another vendor."""
    return Shop.objects.create(
        name='Other Shop',
        vendor=other_vendor,
        is_approved=True,
        country='SA',
        language='ar',
    )


@pytest.fixture
def shop_request(db, vendor, category):
    return ShopRequest.objects.create(
        vendor=vendor,
        name='Requested Shop',
        category=category,
        country='JO',
        language='en',
    )
