import pytest
from django.core.cache import caches
from django.urls import reverse
from rest_framework import status
from apps.rolls.models import Roll, Comment, SavedRoll
from apps.vendors.models import VendorProfile


# =============================================================================
# Feed Tests
# =============================================================================

@pytest.mark.django_db
class TestFeed:
    """Tests for GET /api/rolls/"""

    def test_feed_newest_first(self, api_client, feed_rolls):
        url = reverse('rolls:roll-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        ids = [r['id'] for r in response.data['rolls']]
        assert ids == [str(r.id) for r in feed_rolls]
        assert response.data['has_more'] is False

    def test_feed_cursor_pagination(self, api_client, feed_rolls):
        url = reverse('rolls:roll-list')
        first = api_client.get(url, {'limit': 2})

        assert first.data['has_more'] is True
        assert len(first.data['rolls']) == 2

        second = api_client.get(url, {'limit': 2, 'cursor': first.data['next_cursor']})

        assert [r['id'] for r in second.data['rolls']] == [str(feed_rolls[2].id), str(feed_rolls[3].id)]

    def test_feed_category_filter(self, api_client, feed_rolls):
        url = reverse('rolls:roll-list')
        response = api_client.get(url, {'category': 'shoes'})

        assert {r['category'] for r in response.data['rolls']} == {'shoes'}
        assert len(response.data['rolls']) == 2

    def test_feed_category_all(self, api_client, feed_rolls):
        url = reverse('rolls:roll-list')
        response = api_client.get(url, {'category': 'all'})

        assert len(response.data['rolls']) == 5

    def test_feed_limit_too_large(self, api_client):
        url = reverse('rolls:roll-list')
        response = api_client.get(url, {'limit': 101})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_feed_flags_for_user(self, authenticated_client, user, roll):
        roll.likes.add(user)
        SavedRoll.objects.create(user=user, roll=roll)

        response = authenticated_client.get(reverse('rolls:roll-list'))

        item = response.data['rolls'][0]
        assert item['is_liked'] is True
        assert item['is_saved'] is True
        assert item['shop']['name'] == 'Vendor Shop'

    def test_feed_flags_anonymous(self, api_client, user, roll):
        roll.likes.add(user)

        response = api_client.get(reverse('rolls:roll-list'))

        assert response.data['rolls'][0]['is_liked'] is False

    def test_feed_is_cached(self, api_client, roll, shop):
        url = reverse('rolls:roll-list')
        api_client.get(url)
        Roll.objects.create(shop=shop, video_url='https://cdn.example.com/rolls/2.mp4')

        response = api_client.get(url)

        assert len(response.data['rolls']) == 1

    def test_like_invalidates_feed(self, api_client, authenticated_client, roll):
        url = reverse('rolls:roll-list')
        api_client.get(url)
        authenticated_client.post(reverse('rolls:roll-like', kwargs={'pk': roll.id}))

        response = api_client.get(url)

        assert response.data['rolls'][0]['likes_count'] == 1

    def test_like_keeps_shop_listing_cache(self, authenticated_client, roll):
        caches['feed'].set('shops:public', ['cached'])

        authenticated_client.post(reverse('rolls:roll-like', kwargs={'pk': roll.id}))

        assert caches['feed'].get('shops:public') == ['cached']


# =============================================================================
# Create / Update / Delete Tests
# =============================================================================

@pytest.mark.django_db
class TestRollCreate:
    """Tests for POST /api/rolls/"""

    def payload(self, shop):
        return {
            'shop_id': str(shop.id),
            'video_url': 'https://cdn.example.com/rolls/new.mp4',
            'caption': 'Summer sale',
            'category': 'fashion',
            'duration': 15,
        }

    def test_vendor_creates_roll(self, vendor_client, vendor_profile, shop):
        response = vendor_client.post(reverse('rolls:roll-list'), self.payload(shop))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['remaining_rolls'] == 1
        assert response.data['roll']['duration'] == 15
        vendor_profile.refresh_from_db()
        assert vendor_profile.total_rolls_used == 1
        assert vendor_profile.shop_id == shop.id

    def test_defaults(self, vendor_client, vendor_profile, shop):
        data = {'shop_id': str(shop.id), 'video_url': 'https://cdn.example.com/rolls/new.mp4'}
        response = vendor_client.post(reverse('rolls:roll-list'), data)

        assert response.data['roll']['category'] == 'all'
        assert response.data['roll']['duration'] == 30

    def test_no_rolls_left(self, vendor_client, vendor, shop):
        VendorProfile.objects.create(user=vendor, available_rolls=0)
        response = vendor_client.post(reverse('rolls:roll-list'), self.payload(shop))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Roll.objects.exists()

    def test_other_vendors_shop(self, vendor_client, vendor_profile, other_shop):
        response = vendor_client.post(reverse('rolls:roll-list'), self.payload(other_shop))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        vendor_profile.refresh_from_db()
        assert vendor_profile.available_rolls == 2

    def test_unapproved_shop(self, vendor_client, vendor_profile, pending_shop):
        response = vendor_client.post(reverse('rolls:roll-list'), self.payload(pending_shop))

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_shop(self, vendor_client, vendor_profile):
        data = {
            'shop_id': '00000000-0000-0000-0000-000000000000',
            'video_url': 'https://cdn.example.com/rolls/new.mp4',
        }
        response = vendor_client.post(reverse('rolls:roll-list'), data)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_admin_posts_for_free(self, admin_client, other_shop):
        response = admin_client.post(reverse('rolls:roll-list'), self.payload(other_shop))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['remaining_rolls'] is None

    def test_regular_user_forbidden(self, authenticated_client, shop):
        response = authenticated_client.post(reverse('rolls:roll-list'), self.payload(shop))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unauthenticated(self, api_client, shop):
        response = api_client.post(reverse('rolls:roll-list'), self.payload(shop))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestRollDetail:
    """Tests for /api/rolls/{id}/"""

    def test_retrieve(self, api_client, roll):
        response = api_client.get(reverse('rolls:roll-detail', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['caption'] == 'New arrivals'

    def test_creator_updates(self, vendor_client, roll):
        url = reverse('rolls:roll-detail', kwargs={'pk': roll.id})
        response = vendor_client.patch(url, {'caption': 'Updated'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['caption'] == 'Updated'

    def test_other_user_cannot_update(self, other_vendor_client, roll):
        url = reverse('rolls:roll-detail', kwargs={'pk': roll.id})
        response = other_vendor_client.patch(url, {'caption': 'Hijacked'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_shop_owner_deletes_admin_roll(self, vendor_client, shop, admin_user):
        roll = Roll.objects.create(
            shop=shop, video_url='https://cdn.example.com/rolls/a.mp4', created_by=admin_user,
        )
        response = vendor_client.delete(reverse('rolls:roll-detail', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Roll.objects.filter(id=roll.id).exists()

    def test_stranger_cannot_delete(self, authenticated_client, roll):
        response = authenticated_client.delete(reverse('rolls:roll-detail', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_deletes(self, admin_client, roll):
        response = admin_client.delete(reverse('rolls:roll-detail', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_by_shop(self, api_client, roll, other_shop):
        Roll.objects.create(shop=other_shop, video_url='https://cdn.example.com/rolls/o.mp4')
        url = reverse('rolls:roll-by-shop', kwargs={'shop_id': roll.shop_id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(roll.id)]


# =============================================================================
# Interaction Tests
# =============================================================================

@pytest.mark.django_db
class TestLikes:

    def test_like_and_unlike(self, authenticated_client, roll):
        like_url = reverse('rolls:roll-like', kwargs={'pk': roll.id})
        unlike_url = reverse('rolls:roll-unlike', kwargs={'pk': roll.id})

        response = authenticated_client.post(like_url)
        assert response.data == {'likes_count': 1, 'is_liked': True}

        response = authenticated_client.post(unlike_url)
        assert response.data == {'likes_count': 0, 'is_liked': False}

    def test_double_like(self, authenticated_client, roll):
        url = reverse('rolls:roll-like', kwargs={'pk': roll.id})
        authenticated_client.post(url)
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        roll.refresh_from_db()
        assert roll.likes_count == 1

    def test_unlike_without_like(self, authenticated_client, roll):
        response = authenticated_client.post(reverse('rolls:roll-unlike', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_like_missing_roll(self, authenticated_client):
        url = reverse('rolls:roll-like', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('action', ['like', 'unlike', 'save', 'unsave', 'share', 'comments'])
    def test_malformed_roll_id(self, authenticated_client, action):
        response = authenticated_client.post(f'/api/rolls/not-a-uuid/{action}/')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_like_requires_auth(self, api_client, roll):
        response = api_client.post(reverse('rolls:roll-like', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestSaves:

    def test_save_and_list(self, authenticated_client, roll):
        response = authenticated_client.post(reverse('rolls:roll-bookmark', kwargs={'pk': roll.id}))
        assert response.data == {'saves_count': 1, 'is_saved': True}

        response = authenticated_client.get(reverse('rolls:roll-saved'))
        assert [r['id'] for r in response.data] == [str(roll.id)]
        assert response.data[0]['is_saved'] is True

    def test_double_save(self, authenticated_client, roll):
        url = reverse('rolls:roll-bookmark', kwargs={'pk': roll.id})
        authenticated_client.post(url)
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unsave(self, authenticated_client, user, roll):
        authenticated_client.post(reverse('rolls:roll-bookmark', kwargs={'pk': roll.id}))
        response = authenticated_client.post(reverse('rolls:roll-unbookmark', kwargs={'pk': roll.id}))

        assert response.data == {'saves_count': 0, 'is_saved': False}
        assert not SavedRoll.objects.filter(user=user).exists()

    def test_unsave_not_saved(self, authenticated_client, roll):
        response = authenticated_client.post(reverse('rolls:roll-unbookmark', kwargs={'pk': roll.id}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestShare:

    def test_share_counts(self, api_client, roll):
        url = reverse('rolls:roll-share', kwargs={'pk': roll.id})
        api_client.post(url)
        response = api_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['shares_count'] == 2


# =============================================================================
# Comment Tests
# =============================================================================

@pytest.mark.django_db
class TestComments:

    def test_add_comment(self, authenticated_client, roll):
        url = reverse('rolls:roll-comments', kwargs={'pk': roll.id})
        response = authenticated_client.post(url, {'comment': '  Nice colours  '})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['comment'] == 'Nice colours'
        roll.refresh_from_db()
        assert roll.comments_count == 1

    def test_blank_comment(self, authenticated_client, roll):
        url = reverse('rolls:roll-comments', kwargs={'pk': roll.id})
        response = authenticated_client.post(url, {'comment': '   '})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Comment.objects.exists()

    def test_comment_requires_auth(self, api_client, roll):
        url = reverse('rolls:roll-comments', kwargs={'pk': roll.id})
        response = api_client.post(url, {'comment': 'Hi'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_comments(self, api_client, comment):
        url = reverse('rolls:roll-comments', kwargs={'pk': comment.roll_id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['comment'] == 'Love it'
        assert response.data[0]['is_liked'] is False

    def test_author_edits(self, authenticated_client, comment):
        url = reverse('rolls:comment-detail', kwargs={'pk': comment.id})
        response = authenticated_client.patch(url, {'comment': 'Really love it'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['comment'] == 'Really love it'

    def test_other_user_cannot_edit(self, other_client, comment):
        url = reverse('rolls:comment-detail', kwargs={'pk': comment.id})
        response = other_client.patch(url, {'comment': 'Changed'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_author_deletes(self, authenticated_client, comment):
        url = reverse('rolls:comment-detail', kwargs={'pk': comment.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        comment.roll.refresh_from_db()
        assert comment.roll.comments_count == 0

    def test_like_comment(self, other_client, other_user, comment):
        url = reverse('rolls:comment-like', kwargs={'pk': comment.id})
        response = other_client.post(url)

        assert response.data == {'likes_count': 1, 'is_liked': True}

        listing = other_client.get(reverse('rolls:roll-comments', kwargs={'pk': comment.roll_id}))
        assert listing.data[0]['is_liked'] is True

    def test_like_malformed_comment_id(self, other_client):
        response = other_client.post('/api/rolls/comments/not-a-uuid/like/')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unlike_comment_not_liked(self, other_client, comment):
        response = other_client.post(reverse('rolls:comment-unlike', kwargs={'pk': comment.id}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
