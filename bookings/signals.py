# bookings/signals.py

from django.db.models.signals import post_save
from django.dispatch import receiver

from core.notifications import notify_user
from .models import BookingRequest

"""
Pushes a live notification to the other side of a booking whenever one
is filed or its status changes: the teacher hears about new requests,
the learner hears the answer, and whoever didn't cancel hears about
the cancellation.
RT: Feeds the notification websocket and the header badge.
"""
@receiver(post_save, sender=BookingRequest)
def notify_booking_change(sender, instance, created, update_fields=None, **kwargs):
    if created:
        notify_user(instance.teacher_id, {
            'text': f'{instance.learner_name} requested "{instance.session_title}".',
            'booking_id': instance.pk,
            'status': instance.status,
        })
        return

    if update_fields is None or 'status' not in update_fields:
        return

    if instance.status == BookingRequest.Status.CANCELLED_BY_LEARNER:
        recipient = instance.teacher_id
    else:
        recipient = instance.learner_id
    notify_user(recipient, {
        'text': f'Booking for "{instance.session_title}" is now {instance.get_status_display().lower()}.',
        'booking_id': instance.pk,
        'status': instance.status,
    })
