# messaging/apps.py

from django.apps import AppConfig

"""
The Chat Subsystem: two-person threads, their messages, and the
websocket consumer that streams them.
RT: This app contains the WebSocket consumer for real-time chat.
"""
class MessagingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'messaging'
