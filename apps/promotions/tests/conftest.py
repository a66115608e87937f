import pytest
from datetime import timedelta
from django.utils import timezone
from apps.promotions.models import Offer, Coupon, Ad, AdLinkType
from apps.shops.models import Shop


def make_offer(shop, title, **fields):
    fields.setdefault('discount', '20%')
    fields.setdefault('original_price', '100')
    fields.setdefault('sale_price', '80')
    fields.setdefault('expiry_date', timezone.now() + timedelta(days=7))
    return Offer.objects.create(shop=shop, title=title, **fields)


@pytest.fixture
def shop(db, vendor):
    """Approved Jordanian English-language shop owned by the vendor."""
    return Shop.objects.create(name='Vendor Shop', vendor=vendor, is_approved=True, country='JO', language='en')


@pytest.fixture
def favorite_shop(db, other_vendor, user):
    """Shop the regular user has favourited."""
    shop = Shop.objects.create(name='Favourite Shop', vendor=other_vendor, is_approved=True, country='JO', language='en')
    user.favorites.add(shop)
    return shop


@pytest.fixture
def foreign_shop(db, other_vendor):
    return Shop.objects.create(name='Foreign Shop', vendor=other_vendor, is_approved=True, country='SA', language='ar')


@pytest.fixture
def offer(db, shop):
    return make_offer(shop, 'Half price shoes')


@pytest.fixture
def coupon(db, shop):
    return Coupon.objects.create(
        shop=shop,
        code='SAVE10',
        discount='10%',
        expiry_date=timezone.now() + timedelta(days=3),
    )


@pytest.fixture
def expired_coupon(db, shop):
    return Coupon.objects.create(
        shop=shop,
        code='OLD5',
        discount='5%',
        expiry_date=timezone.now() - timedelta(days=1),
    )


@pytest.fixture
def ad(db, admin_user):
    return Ad.objects.create(
        title='Spring campaign',
        image='https://cdn.example.com/ads/spring.png',
        link_type=AdLinkType.EXTERNAL,
        link_url='https://example.com/spring',
        created_by=admin_user,
    )
