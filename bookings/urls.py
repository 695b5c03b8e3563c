# bookings/urls.py

from django.urls import path
from .views import request_booking_view, my_bookings_view, respond_to_booking_view, cancel_booking_view

urlpatterns = [
    path('', my_bookings_view, name='my_bookings'),
    path('request/<int:session_id>/', request_booking_view, name='request_booking'),
    path('<int:pk>/cancel/', cancel_booking_view, name='cancel_booking'),
    # Teacher answers, decision is "confirmed" or "rejected"
    path('<int:pk>/<str:decision>/', respond_to_booking_view, name='respond_to_booking'),
]
