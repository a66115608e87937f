import pytest
from apps.shops.models import Shop


@pytest.fixture
def shop(db, vendor):
    return Shop.objects.create(name='Popular Shop', vendor=vendor, is_approved=True, country='JO')


@pytest.fixture
def second_shop(db, other_vendor):
    return Shop.objects.create(name='Second Shop', vendor=other_vendor, is_approved=True, country='JO')


@pytest.fixture
def pending_shop(db, vendor):
    return Shop.objects.create(name='Pending Shop', vendor=vendor, is_approved=False)
