# core/apps.py

from django.apps import AppConfig

"""
Project-wide glue that doesn't belong to one feature: the per-user
notification websocket, the channel-layer helpers every app uses to
push updates, and image handling for uploads.
"""
class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
