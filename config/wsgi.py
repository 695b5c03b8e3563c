# config/wsgi.py

import os
from django.core.wsgi import get_wsgi_application

"""
Entry-point for plain WSGI servers. Real-time features need the
ASGI application in config/asgi.py instead.
"""
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
