from django.urls import path
from . import views

app_name = 'leaderboard'

urlpatterns = [
    path('shops/<uuid:shop_id>/share/', views.share_shop, name='share-shop'),
    path('top-shared-shops/', views.top_shared, name='top-shared'),
]

# Routes:
# POST /api/leaderboard/shops/{shop_id}/share/  - count a shop share
# GET  /api/leaderboard/top-shared-shops/       - weekly top shared shops (?country for guests)
