import pytest
from datetime import timedelta
from django.utils import timezone
from apps.rolls.models import Roll, Comment
from apps.shops.models import Shop
from apps.vendors.models import VendorProfile


@pytest.fixture
def shop(db, vendor):
    """Approved shop owned by the vendor."""
    return Shop.objects.create(name='Vendor Shop', vendor=vendor, is_approved=True, country='JO')


@pytest.fixture
def pending_shop(db, vendor):
    return Shop.objects.create(name='Pending Shop', vendor=vendor, is_approved=False)


@pytest.fixture
def other_shop(db, other_vendor):
    return Shop.objects.create(name='Other Shop', vendor=other_vendor, is_approved=True)


@pytest.fixture
def vendor_profile(db, vendor):
    return VendorProfile.objects.create(user=vendor, available_rolls=2)


@pytest.fixture
def roll(db, shop, vendor):
    """Roll posted by the vendor for their shop."""
    return Roll.objects.create(
        shop=shop,
        video_url='https://cdn.example.com/rolls/1.mp4',
        caption='New arrivals',
        category='fashion',
        created_by=vendor,
    )


@pytest.fixture
def feed_rolls(db, shop, vendor):
    """Five rolls one minute apart; index 0 is the newest."""
    now = timezone.now()
    rolls = []
    for i in range(5):
        roll = Roll.objects.create(
            shop=shop,
            video_url=f'https://cdn.example.com/rolls/feed-{i}.mp4',
            category='fashion' if i % 2 == 0 else 'shoes',
            created_by=vendor,
        )
        Roll.objects.filter(id=roll.id).update(created_at=now - timedelta(minutes=i))
        roll.refresh_from_db()
        rolls.append(roll)
    return rolls


@pytest.fixture
def comment(db, roll, user):
    """Comment by the regular user."""
    Roll.objects.filter(id=roll.id).update(comments_count=1)
    return Comment.objects.create(roll=roll, user=user, comment='Love it')
