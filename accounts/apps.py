# accounts/apps.py

from django.apps import AppConfig

"""
The User Directory: the custom email-login user with its role and
profile fields, sign-up/sign-in commands and role gating.
"""
class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'
