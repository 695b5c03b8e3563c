# messaging/routing.py

from django.urls import re_path
from . import consumers

"""
The websocket address of a chat thread, e.g. /ws/chat/123/.
RT: Routed to ChatConsumer.
"""
websocket_urlpatterns = [
    re_path(r'ws/chat/(?P<thread_id>\d+)/$', consumers.ChatConsumer.as_asgi()),
]
