from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('send-verification-code/', views.send_verification_code, name='send-verification-code'),
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # User profile
    path('user/', views.get_current_user, name='current-user'),
    path('user/update/', views.update_profile, name='update-profile'),

    # User management
    path('users/', views.list_users, name='user-list'),
    path('users/<uuid:pk>/', views.UserDetailView.as_view(), name='user-detail'),
    path('users/<uuid:pk>/delete/', views.delete_user, name='user-delete'),
]
