from django.urls import path
from . import views

app_name = 'vendors'

urlpatterns = [
    # Vendor profile and balance
    # GET  /api/vendors/profile/                 - Dashboard
    # POST /api/vendors/spend-roll/              - Spend one roll credit
    path('', views.list_vendor_profiles, name='vendor-list'),
    path('profile/', views.vendor_profile, name='profile'),
    path('spend-roll/', views.spend_roll, name='spend-roll'),

    # Roll packages
    path('packages/', views.list_packages, name='package-list'),
    path('packages/purchase/', views.purchase_package, name='package-purchase'),
    path('packages/store-purchase/', views.store_purchase, name='package-store-purchase'),
    path('packages/grant/', views.grant_package, name='package-grant'),
    path('packages/history/', views.package_history, name='package-history'),

    # Share-to-earn
    path('share/', views.record_share, name='share'),
    path('share/stats/', views.share_stats, name='share-stats'),
]
