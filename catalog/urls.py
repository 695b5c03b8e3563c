# catalog/urls.py

from django.urls import path
from .views import (
    discover_view, session_detail_view, create_session_view, edit_session_view,
    delete_session_view, teaching_dashboard_view, geocode_pincode_view,
)

urlpatterns = [
    path('', discover_view, name='discover'),
    path('<int:pk>/', session_detail_view, name='session_detail'),

    # Teacher-only pages
    path('teaching/', teaching_dashboard_view, name='teaching_dashboard'),
    path('teaching/create/', create_session_view, name='create_session'),
    path('teaching/<int:pk>/edit/', edit_session_view, name='edit_session'),
    path('teaching/<int:pk>/delete/', delete_session_view, name='delete_session'),

    # JSON lookup for the map marker on the session form
    path('geocode/pincode/', geocode_pincode_view, name='geocode_pincode'),
]
