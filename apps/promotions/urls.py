from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import OfferViewSet, CouponViewSet, AdViewSet

app_name = 'promotions'

router = SimpleRouter()
router.register(r'offers', OfferViewSet, basename='offer')
router.register(r'coupons', CouponViewSet, basename='coupon')
router.register(r'ads', AdViewSet, basename='ad')

urlpatterns = [
    path('', include(router.urls)),
]

# Routes:
# GET    /api/offers/                   - personalised offers
# POST   /api/offers/                   - create offer (vendor/admin)
# GET    /api/offers/shop/{shop_id}/    - offers of a shop
# GET    /api/offers/{id}/              - offer detail
# PATCH  /api/offers/{id}/              - update (shop owner/admin)
# DELETE /api/offers/{id}/              - delete (shop owner/admin)
# GET    /api/coupons/                  - non-expired coupons (page, limit)
# POST   /api/coupons/                  - create coupon (vendor/admin)
# GET    /api/coupons/{id}/             - coupon detail
# PATCH  /api/coupons/{id}/             - update (shop owner/admin)
# DELETE /api/coupons/{id}/             - delete (shop owner/admin)
# GET    /api/ads/                      - active ads
# GET    /api/ads/all/                  - all ads (admin)
# POST   /api/ads/                      - create ad (admin)
# PATCH  /api/ads/{id}/                 - update ad (admin)
# DELETE /api/ads/{id}/                 - delete ad (admin)
