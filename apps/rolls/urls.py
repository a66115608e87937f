from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import RollViewSet, CommentViewSet

app_name = 'rolls'

router = DefaultRouter()
router.register(r'comments', CommentViewSet, basename='comment')
router.register(r'', RollViewSet, basename='roll')

urlpatterns = [
    path('', include(router.urls)),
]

# Routes:
# GET    /api/rolls/                        - feed (category, cursor, limit)
# POST   /api/rolls/                        - create roll (vendor/admin)
# GET    /api/rolls/saved/                  - current user's saved rolls
# GET    /api/rolls/shop/{shop_id}/         - rolls of a shop
# GET    /api/rolls/{id}/                   - roll detail
# PATCH  /api/rolls/{id}/                   - update (creator/admin)
# DELETE /api/rolls/{id}/                   - delete (creator/shop owner/admin)
# POST   /api/rolls/{id}/like/              - like
# POST   /api/rolls/{id}/unlike/            - unlike
# POST   /api/rolls/{id}/share/             - count a share
# POST   /api/rolls/{id}/save/              - save
# POST   /api/rolls/{id}/unsave/            - unsave
# GET    /api/rolls/{id}/comments/          - list comments
# POST   /api/rolls/{id}/comments/          - add comment
# PATCH  /api/rolls/comments/{id}/          - edit own comment
# DELETE /api/rolls/comments/{id}/          - delete own comment
# POST   /api/rolls/comments/{id}/like/     - like comment
# POST   /api/rolls/comments/{id}/unlike/   - unlike comment
