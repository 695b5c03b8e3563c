# accounts/urls.py

from django.urls import path
from .views import (
    signup_view, login_view, logout_view, profile_view, edit_profile_view,
    upload_avatar_view,
)

urlpatterns = [
    # Auth
    path('signup/', signup_view, name='signup'),
    path('login/', login_view, name='login'),
    path('logout/', logout_view, name='logout'),

    # Profile URLs
    path('profile/', profile_view, name='my_profile'),
    path('profile/edit/', edit_profile_view, name='edit_profile'),
    path('profile/avatar/', upload_avatar_view, name='upload_avatar'),
    path('profile/<int:pk>/', profile_view, name='profile'),
]
