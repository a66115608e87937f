from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'shops'

# Note: categories and requests must be registered BEFORE the empty prefix
router = DefaultRouter()
router.register(r'categories', views.CategoryViewSet, basename='category')
router.register(r'requests', views.ShopRequestViewSet, basename='shop-request')
router.register(r'', views.ShopViewSet, basename='shop')

urlpatterns = [
    # Shop ViewSet routes
    # GET    /api/shops/                  - List approved shops (cached)
    # POST   /api/shops/                  - Create shop (vendor/admin)
    # GET    /api/shops/{id}/             - Get shop
    # PATCH  /api/shops/{id}/             - Update shop (owner/admin)
    # DELETE /api/shops/{id}/             - Delete shop (admin)

    # Custom shop actions
    # GET    /api/shops/{id}/reviews/     - List reviews
    # POST   /api/shops/{id}/reviews/     - Add review
    # POST   /api/shops/{id}/favorite/    - Toggle favorite
    # GET    /api/shops/favorites/        - Current user's favorites
    # GET    /api/shops/mine/             - Current vendor's shops

    # Shop requests
    # POST   /api/shops/requests/               - Submit request (vendor)
    # GET    /api/shops/requests/               - List requests
    # POST   /api/shops/requests/{id}/approve/  - Approve (admin)
    # POST   /api/shops/requests/{id}/reject/   - Reject (admin)

    # Reference data
    path('countries/', views.countries, name='countries'),
    path('languages/', views.languages, name='languages'),

    # Include router URLs
    path('', include(router.urls)),
]
