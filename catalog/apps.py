# catalog/apps.py

from django.apps import AppConfig

"""
The Session Catalog: sessions teachers publish, the discovery listing
learners browse, and the geocoding lookups behind the map marker.
"""
class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'catalog'
