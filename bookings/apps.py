# bookings/apps.py

from django.apps import AppConfig

"""
The Booking Workflow. ready() imports the signal handlers that push
booking changes to the other party in real time.
"""
class BookingsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bookings'

    def ready(self):
        import bookings.signals
