# assist/urls.py

from django.urls import path
from .views import recommendations_view, content_assistant_view

urlpatterns = [
    path('recommendations/', recommendations_view, name='recommendations'),
    path('content/', content_assistant_view, name='content_assistant'),
]
