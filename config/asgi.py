# config/asgi.py

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter
from channels.auth import AuthMiddlewareStack
from core import routing as core_routing
from messaging import routing as messaging_routing

"""
Main entry-point for the server. Plain HTTP requests go to Django,
websocket connections go to the channels routers.
RT: The chat thread subscriptions and the per-user notification
stream are both served from here.
"""
application = ProtocolTypeRouter({
    "http": django_asgi_app,
    "websocket": AuthMiddlewareStack(
        URLRouter(
            core_routing.websocket_urlpatterns +
            messaging_routing.websocket_urlpatterns
        )
    ),
})
