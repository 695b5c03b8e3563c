# assist/apps.py

from django.apps import AppConfig

"""
AI helpers: session recommendations for learners and title and
description drafting for teachers. No database tables of its own.
"""
class AssistConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'assist'
