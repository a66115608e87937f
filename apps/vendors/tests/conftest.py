import pytest
from apps.shops.models import Shop
from apps.vendors.models import VendorProfile


@pytest.fixture
def vendor_profile(db, vendor):
    """Vendor profile with a handful of credits."""
    return VendorProfile.objects.create(user=vendor, available_rolls=3)


@pytest.fixture
def empty_profile(db, vendor):
    """Vendor profile with no credits left."""
    return VendorProfile.objects.create(user=vendor, available_rolls=0, total_rolls_used=4)


@pytest.fixture
def approved_shop(db, vendor):
    return Shop.objects.create(name='Approved Shop', vendor=vendor, is_approved=True)


@pytest.fixture
def apple_ok_response():
    """App Store verifyReceipt payload for a valid 50-roll purchase."""
    return {
        'status': 0,
        'receipt': {
            'in_app': [{'product_id': 'com.bigbag.rolls.50'}],
        },
    }
