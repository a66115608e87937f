import pytest
from datetime import timedelta
from django.urls import reverse
from rest_framework import status
from apps.leaderboard.models import WeeklyShopShare
from apps.leaderboard.services import week_start


def share_url(shop_id):
    return reverse('leaderboard:share-shop', kwargs={'shop_id': shop_id})


# =============================================================================
# Share Tests
# =============================================================================

@pytest.mark.django_db
class TestShareShop:
    """Tests for POST /api/leaderboard/shops/{id}/share/"""

    def test_guest_share_with_country(self, api_client, shop):
        response = api_client.post(share_url(shop.id), {'country': 'Jordan'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['share_count'] == 1
        counter = WeeklyShopShare.objects.get(shop=shop)
        assert counter.country == 'JO'
        assert counter.share_count == 1
        assert counter.week_start == week_start()

    def test_guest_share_without_country(self, api_client, shop):
        response = api_client.post(share_url(shop.id))

        assert response.data['share_count'] == 1
        assert not WeeklyShopShare.objects.exists()

    def test_user_country_wins(self, authenticated_client, shop):
        authenticated_client.post(share_url(shop.id), {'country': 'SA'})

        assert WeeklyShopShare.objects.get(shop=shop).country == 'JO'

    def test_repeated_shares_accumulate(self, api_client, shop):
        api_client.post(share_url(shop.id), {'country': 'JO'})
        response = api_client.post(share_url(shop.id), {'country': 'JO'})

        assert response.data['share_count'] == 2
        assert WeeklyShopShare.objects.get(shop=shop).share_count == 2

    def test_country_outside_lookup_table_counted(self, api_client, shop):
        response = api_client.post(share_url(shop.id), {'country': 'PL'})

        assert response.status_code == status.HTTP_200_OK
        assert WeeklyShopShare.objects.get(shop=shop).country == 'PL'

        top = api_client.get(reverse('leaderboard:top-shared'), {'country': 'pl'})

        assert top.status_code == status.HTTP_200_OK
        assert [s['name'] for s in top.data] == ['Popular Shop']

    def test_missing_shop(self, api_client):
        response = api_client.post(share_url('00000000-0000-0000-0000-000000000000'))

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Leaderboard Tests
# =============================================================================

@pytest.mark.django_db
class TestTopShared:
    """Tests for GET /api/leaderboard/top-shared-shops/"""

    def test_ranking(self, api_client, shop, second_shop):
        WeeklyShopShare.objects.create(shop=shop, country='JO', week_start=week_start(), share_count=3)
        WeeklyShopShare.objects.create(shop=second_shop, country='JO', week_start=week_start(), share_count=7)

        response = api_client.get(reverse('leaderboard:top-shared'), {'country': 'JO'})

        assert response.status_code == status.HTTP_200_OK
        assert [s['name'] for s in response.data] == ['Second Shop', 'Popular Shop']
        assert response.data[0]['weekly_shares'] == 7

    def test_unapproved_excluded(self, api_client, shop, pending_shop):
        WeeklyShopShare.objects.create(shop=shop, country='JO', week_start=week_start(), share_count=1)
        WeeklyShopShare.objects.create(shop=pending_shop, country='JO', week_start=week_start(), share_count=9)

        response = api_client.get(reverse('leaderboard:top-shared'), {'country': 'JO'})

        assert [s['name'] for s in response.data] == ['Popular Shop']

    def test_latest_active_week(self, api_client, shop, second_shop):
        last_week = week_start() - timedelta(days=7)
        WeeklyShopShare.objects.create(shop=shop, country='JO', week_start=last_week, share_count=50)
        WeeklyShopShare.objects.create(shop=second_shop, country='JO', week_start=week_start(), share_count=1)

        response = api_client.get(reverse('leaderboard:top-shared'), {'country': 'JO'})

        assert [s['name'] for s in response.data] == ['Second Shop']

    def test_falls_back_to_previous_week(self, api_client, shop):
        last_week = week_start() - timedelta(days=7)
        WeeklyShopShare.objects.create(shop=shop, country='JO', week_start=last_week, share_count=4)

        response = api_client.get(reverse('leaderboard:top-shared'), {'country': 'JO'})

        assert response.data[0]['weekly_shares'] == 4

    def test_other_country_not_mixed(self, api_client, shop):
        WeeklyShopShare.objects.create(shop=shop, country='SA', week_start=week_start(), share_count=4)

        response = api_client.get(reverse('leaderboard:top-shared'), {'country': 'JO'})

        assert response.data == []

    def test_authenticated_user_uses_own_country(self, authenticated_client, shop):
        WeeklyShopShare.objects.create(shop=shop, country='JO', week_start=week_start(), share_count=2)

        response = authenticated_client.get(reverse('leaderboard:top-shared'), {'country': 'SA'})

        assert response.data[0]['name'] == 'Popular Shop'

    def test_guest_without_country(self, api_client):
        response = api_client.get(reverse('leaderboard:top-shared'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'guest' in response.data['error']

    def test_user_without_country(self, other_client):
        response = other_client.get(reverse('leaderboard:top-shared'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_blank_country(self, api_client):
        response = api_client.get(reverse('leaderboard:top-shared'), {'country': '   '})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_results_are_cached(self, api_client, shop, second_shop):
        WeeklyShopShare.objects.create(shop=shop, country='JO', week_start=week_start(), share_count=2)
        url = reverse('leaderboard:top-shared')
        api_client.get(url, {'country': 'JO'})
        WeeklyShopShare.objects.create(shop=second_shop, country='JO', week_start=week_start(), share_count=9)

        response = api_client.get(url, {'country': 'JO'})

        assert len(response.data) == 1
