import pytest
from datetime import timedelta
from apps.rolls.models import Roll
from apps.rolls.services import (
    create_roll,
    get_feed,
    like_roll,
    unlike_roll,
    create_comment,
    delete_comment,
    RollPermissionError,
    RollNotFoundError,
    InvalidCommentError,
)
from apps.vendors.models import VendorProfile


@pytest.mark.django_db
class TestCreateRoll:

    def test_credit_is_consumed(self, vendor, vendor_profile, shop):
        roll, remaining = create_roll(
            user=vendor, shop_id=shop.id, video_url='https://cdn.example.com/r.mp4',
        )

        assert remaining == 1
        assert roll.created_by == vendor
        assert roll.category == 'all'

    def test_first_roll_uses_initial_allocation(self, vendor, shop):
        _, remaining = create_roll(
            user=vendor, shop_id=shop.id, video_url='https://cdn.example.com/r.mp4',
        )

        assert remaining == 0
        assert VendorProfile.objects.get(user=vendor).shop == shop

    def test_regular_user(self, user, shop):
        with pytest.raises(RollPermissionError):
            create_roll(user=user, shop_id=shop.id, video_url='https://cdn.example.com/r.mp4')


@pytest.mark.django_db
class TestFeed:

    def test_cursor_excludes_equal_timestamp(self, feed_rolls):
        feed = get_feed(cursor=feed_rolls[1].created_at, limit=10)

        assert [r.id for r in feed['rolls']] == [r.id for r in feed_rolls[2:]]

    def test_empty_feed(self, db):
        feed = get_feed()

        assert feed['rolls'] == []
        assert feed['next_cursor'] is None
        assert feed['has_more'] is False

    def test_limit_is_clamped(self, feed_rolls):
        feed = get_feed(limit=1000)

        assert len(feed['rolls']) == 5

    def test_future_cursor(self, feed_rolls):
        feed = get_feed(cursor=feed_rolls[0].created_at + timedelta(days=1), limit=2)

        assert feed['has_more'] is True
        assert feed['next_cursor'] == feed_rolls[1].created_at


@pytest.mark.django_db
class TestCounters:

    def test_unlike_never_negative(self, user, roll):
        roll.likes.add(user)

        roll = unlike_roll(roll_id=roll.id, user=user)

        assert roll.likes_count == 0

    def test_like_missing_roll(self, user):
        with pytest.raises(RollNotFoundError):
            like_roll(roll_id='00000000-0000-0000-0000-000000000000', user=user)

    def test_comment_counter(self, user, roll):
        comment = create_comment(roll_id=roll.id, user=user, comment='First')
        create_comment(roll_id=roll.id, user=user, comment='Second')
        delete_comment(comment=comment)

        assert Roll.objects.get(id=roll.id).comments_count == 1

    def test_delete_comment_with_stale_counter(self, comment):
        Roll.objects.filter(id=comment.roll_id).update(comments_count=0)

        delete_comment(comment=comment)

        assert Roll.objects.get(id=comment.roll_id).comments_count == 0

    def test_blank_comment(self, user, roll):
        with pytest.raises(InvalidCommentError):
            create_comment(roll_id=roll.id, user=user, comment='\n ')
