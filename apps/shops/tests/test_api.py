import pytest
from django.urls import reverse
from rest_framework import status
from apps.shops.models import Category, Shop, ShopRequest, Review
from apps.vendors.models import VendorProfile


# =============================================================================
# Category Tests
# =============================================================================

@pytest.mark.django_db
class TestCategories:
    """Tests for /api/shops/categories/"""

    def test_list_active_categories(self, api_client, category, inactive_category):
        url = reverse('shops:category-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [c['name'] for c in response.data] == ['Fashion']

    def test_admin_sees_inactive_categories(self, admin_client, category, inactive_category):
        url = reverse('shops:category-list')
        response = admin_client.get(url)

        assert len(response.data) == 2

    def test_admin_creates_category(self, admin_client, admin_user):
        url = reverse('shops:category-list')
        response = admin_client.post(url, {'name': '  Beauty  ', 'color': '#00ff00'})

        assert response.status_code == status.HTTP_201_CREATED
        category = Category.objects.get(name='Beauty')
        assert category.created_by == admin_user

    def test_duplicate_name_case_insensitive(self, admin_client, category):
        url = reverse('shops:category-list')
        response = admin_client.post(url, {'name': 'fashion'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_vendor_cannot_create_category(self, vendor_client):
        url = reverse('shops:category-list')
        response = vendor_client.post(url, {'name': 'Toys'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_renames_category(self, admin_client, category):
        url = reverse('shops:category-detail', kwargs={'pk': category.id})
        response = admin_client.patch(url, {'name': 'Clothing'})

        assert response.status_code == status.HTTP_200_OK
        category.refresh_from_db()
        assert category.name == 'Clothing'

    def test_rename_to_existing_name(self, admin_client, category, inactive_category):
        url = reverse('shops:category-detail', kwargs={'pk': inactive_category.id})
        response = admin_client.patch(url, {'name': 'FASHION'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Shop Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestShopList:
    """Tests for GET /api/shops/"""

    def test_list_only_approved(self, api_client, shop, pending_shop, other_shop):
        url = reverse('shops:shop-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2
        names = {s['name'] for s in response.data['results']}
        assert names == {'Vendor Shop', 'Other Shop'}

    def test_filter_by_language(self, api_client, shop, other_shop):
        url = reverse('shops:shop-list')
        response = api_client.get(url, {'language': 'ar'})

        assert [s['name'] for s in response.data['results']] == ['Other Shop']

    def test_filter_by_category(self, api_client, shop, other_shop, category):
        url = reverse('shops:shop-list')
        response = api_client.get(url, {'category': str(category.id)})

        assert [s['name'] for s in response.data['results']] == ['Vendor Shop']

    def test_page_and_limit(self, api_client, shop, other_shop):
        url = reverse('shops:shop-list')
        response = api_client.get(url, {'page': 2, 'limit': 1})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2
        assert len(response.data['results']) == 1

    def test_limit_above_maximum_rejected(self, api_client):
        url = reverse('shops:shop-list')
        response = api_client.get(url, {'limit': 500})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_listing_is_cached(self, api_client, shop, other_vendor):
        url = reverse('shops:shop-list')
        api_client.get(url)
        Shop.objects.create(name='Late Shop', vendor=other_vendor, is_approved=True)

        response = api_client.get(url)

        assert response.data['count'] == 1


# =============================================================================
# Shop CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestShopCreate:
    """Tests for POST /api/shops/"""

    def test_vendor_creates_unapproved_shop(self, vendor_client, vendor, category):
        url = reverse('shops:shop-list')
        data = {
            'name': 'New Shop',
            'category': str(category.id),
            'country': 'Jordan',
            'language': 'ar',
            'is_approved': True,
        }
        response = vendor_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        shop = Shop.objects.get(name='New Shop')
        assert shop.is_approved is False
        assert shop.vendor == vendor
        assert shop.country == 'JO'

    def test_admin_creates_approved_shop_for_vendor(self, admin_client, vendor):
        url = reverse('shops:shop-list')
        response = admin_client.post(url, {'name': 'Admin Shop', 'vendor': str(vendor.id)}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        shop = Shop.objects.get(name='Admin Shop')
        assert shop.is_approved is True
        assert VendorProfile.objects.get(user=vendor).shop == shop

    def test_user_cannot_create_shop(self, authenticated_client):
        url = reverse('shops:shop-list')
        response = authenticated_client.post(url, {'name': 'Nope'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_invalid_supported_countries(self, vendor_client):
        url = reverse('shops:shop-list')
        response = vendor_client.post(url, {'name': 'Bad', 'supported_countries': 'JO'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestShopDetail:
    """Tests for /api/shops/{id}/"""

    def test_retrieve_approved_shop(self, api_client, shop):
        url = reverse('shops:shop-detail', kwargs={'pk': shop.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['category']['name'] == 'Fashion'

    def test_pending_shop_hidden_from_public(self, api_client, pending_shop):
        url = reverse('shops:shop-detail', kwargs={'pk': pending_shop.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_pending_shop_visible_to_owner(self, vendor_client, pending_shop):
        url = reverse('shops:shop-detail', kwargs={'pk': pending_shop.id})
        response = vendor_client.get(url)

        assert response.status_code == status.HTTP_200_OK

    def test_owner_updates_shop(self, vendor_client, shop):
        url = reverse('shops:shop-detail', kwargs={'pk': shop.id})
        response = vendor_client.patch(url, {'description': 'Updated'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        shop.refresh_from_db()
        assert shop.description == 'Updated'

    def test_owner_cannot_self_approve(self, vendor_client, pending_shop):
        url = reverse('shops:shop-detail', kwargs={'pk': pending_shop.id})
        vendor_client.patch(url, {'is_approved': True}, format='json')

        pending_shop.refresh_from_db()
        assert pending_shop.is_approved is False

    def test_other_vendor_cannot_update(self, other_vendor_client, shop):
        url = reverse('shops:shop-detail', kwargs={'pk': shop.id})
        response = other_vendor_client.patch(url, {'description': 'Hijacked'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_approves_shop(self, admin_client, pending_shop):
        url = reverse('shops:shop-detail', kwargs={'pk': pending_shop.id})
        response = admin_client.patch(url, {'is_approved': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        pending_shop.refresh_from_db()
        assert pending_shop.is_approved is True

    def test_only_admin_deletes(self, vendor_client, admin_client, shop):
        url = reverse('shops:shop-detail', kwargs={'pk': shop.id})

        assert vendor_client.delete(url).status_code == status.HTTP_403_FORBIDDEN
        assert admin_client.delete(url).status_code == status.HTTP_204_NO_CONTENT
        assert not Shop.objects.filter(id=shop.id).exists()

    def test_mine_lists_vendor_shops(self, vendor_client, shop, pending_shop, other_shop):
        url = reverse('shops:shop-mine')
        response = vendor_client.get(url)

        assert {s['name'] for s in response.data} == {'Vendor Shop', 'Pending Shop'}


# =============================================================================
# Review Tests
# =============================================================================

@pytest.mark.django_db
class TestReviews:
    """Tests for /api/shops/{id}/reviews/"""

    def test_add_review_updates_rating(self, authenticated_client, other_client, shop):
        url = reverse('shops:shop-reviews', kwargs={'pk': shop.id})
        authenticated_client.post(url, {'rating': 5, 'comment': 'Great'})
        response = other_client.post(url, {'rating': 4, 'comment': 'Good'})

        assert response.status_code == status.HTTP_201_CREATED
        shop.refresh_from_db()
        assert shop.rating == 4.5
        assert shop.review_count == 2

    def test_duplicate_review_rejected(self, authenticated_client, shop):
        url = reverse('shops:shop-reviews', kwargs={'pk': shop.id})
        authenticated_client.post(url, {'rating': 5, 'comment': 'Great'})
        response = authenticated_client.post(url, {'rating': 1, 'comment': 'Changed my mind'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Review.objects.filter(shop=shop).count() == 1

    def test_rating_out_of_range(self, authenticated_client, shop):
        url = reverse('shops:shop-reviews', kwargs={'pk': shop.id})
        response = authenticated_client.post(url, {'rating': 6, 'comment': 'Too good'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_reviews_public(self, api_client, shop, user):
        Review.objects.create(shop=shop, user=user, user_name='Test User', rating=3, comment='Ok')
        url = reverse('shops:shop-reviews', kwargs={'pk': shop.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['user_name'] == 'Test User'

    def test_anonymous_cannot_review(self, api_client, shop):
        url = reverse('shops:shop-reviews', kwargs={'pk': shop.id})
        response = api_client.post(url, {'rating': 5, 'comment': 'Great'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Favorite Tests
# =============================================================================

@pytest.mark.django_db
class TestFavorites:
    """Tests for favorite toggling and listing"""

    def test_toggle_favorite(self, authenticated_client, user, shop):
        url = reverse('shops:shop-favorite', kwargs={'pk': shop.id})

        response = authenticated_client.post(url)
        assert response.data['is_favorite'] is True
        assert user.favorites.filter(id=shop.id).exists()

        response = authenticated_client.post(url)
        assert response.data['is_favorite'] is False
        assert not user.favorites.filter(id=shop.id).exists()

    def test_list_favorites(self, authenticated_client, user, shop, other_shop):
        user.favorites.add(other_shop)
        url = reverse('shops:shop-favorites')
        response = authenticated_client.get(url)

        assert [s['name'] for s in response.data] == ['Other Shop']

    def test_favorites_require_auth(self, api_client):
        url = reverse('shops:shop-favorites')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Shop Request Tests
# =============================================================================

@pytest.mark.django_db
class TestShopRequests:
    """Tests for /api/shops/requests/"""

    def test_vendor_submits_request(self, vendor_client, vendor):
        url = reverse('shops:shop-request-list')
        response = vendor_client.post(url, {'name': 'My Store', 'country': 'Saudi Arabia'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        shop_request = ShopRequest.objects.get(name='My Store')
        assert shop_request.vendor == vendor
        assert shop_request.country == 'SA'

    def test_user_cannot_submit_request(self, authenticated_client):
        url = reverse('shops:shop-request-list')
        response = authenticated_client.post(url, {'name': 'My Store'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_vendor_sees_only_own_requests(self, other_vendor_client, shop_request):
        url = reverse('shops:shop-request-list')
        response = other_vendor_client.get(url)

        assert response.data['count'] == 0

    def test_admin_approves_request(self, admin_client, shop_request, vendor):
        url = reverse('shops:shop-request-approve', kwargs={'pk': shop_request.id})
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_201_CREATED
        shop = Shop.objects.get(name='Requested Shop')
        assert shop.is_approved is True
        assert shop.vendor == vendor
        assert not ShopRequest.objects.filter(id=shop_request.id).exists()
        assert VendorProfile.objects.get(user=vendor).shop == shop

    def test_admin_rejects_request(self, admin_client, shop_request):
        url = reverse('shops:shop-request-reject', kwargs={'pk': shop_request.id})
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not ShopRequest.objects.filter(id=shop_request.id).exists()

    def test_vendor_cannot_approve(self, vendor_client, shop_request):
        url = reverse('shops:shop-request-approve', kwargs={'pk': shop_request.id})
        response = vendor_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_approve_missing_request(self, admin_client):
        url = reverse('shops:shop-request-approve', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('action', ['approve', 'reject'])
    def test_malformed_request_id(self, admin_client, action):
        response = admin_client.post(f'/api/shops/requests/abc/{action}/')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Reference Data Tests
# =============================================================================

@pytest.mark.django_db
class TestReferenceData:

    def test_countries(self, api_client):
        response = api_client.get(reverse('shops:countries'))

        assert response.status_code == status.HTTP_200_OK
        assert {'code': 'JO', 'name': 'Jordan'} in response.data

    def test_languages(self, api_client):
        response = api_client.get(reverse('shops:languages'))

        assert response.status_code == status.HTTP_200_OK
        assert any(lang['code'] == 'ar' for lang in response.data)
