# core/routing.py

from django.urls import path
from . import consumers

"""
RT: Websocket route for the personal notification stream.
"""
websocket_urlpatterns = [
    path("ws/notifications/", consumers.NotificationConsumer.as_asgi()),
]
