# bookings/models.py

from django.conf import settings
from django.db import models

from catalog.models import Session

"""
A learner's claim on a session. The session's title, time, place and
cover are copied in when the request is made and never refreshed, so
a booking still reads sensibly after the session is edited or deleted.
The teacher answers pending requests; either side can cancel.
Rows are never deleted, only moved through their statuses.
"""
class BookingRequest(models.Model):
    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        CONFIRMED = 'confirmed', 'Confirmed'
        REJECTED = 'rejected', 'Rejected'
        CANCELLED_BY_LEARNER = 'cancelled_by_learner', 'Cancelled by learner'
        CANCELLED_BY_TEACHER = 'cancelled_by_teacher', 'Cancelled by teacher'
        COMPLETED = 'completed', 'Completed'

    ACTIVE_STATUSES = (Status.PENDING, Status.CONFIRMED)

    session = models.ForeignKey(Session, on_delete=models.SET_NULL, null=True, related_name='booking_requests')
    session_id_snapshot = models.PositiveBigIntegerField()
    session_title = models.CharField(max_length=200, blank=True)
    session_date_time = models.DateTimeField(blank=True, null=True)
    session_location = models.CharField(max_length=255, blank=True)
    session_cover_image_url = models.CharField(max_length=500, blank=True)

    learner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='booking_requests')
    learner_name = models.CharField(max_length=150, blank=True)
    teacher = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='received_booking_requests')
    teacher_name = models.CharField(max_length=150, blank=True)

    status = models.CharField(max_length=25, choices=Status.choices, default=Status.PENDING)
    requested_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-requested_at', '-id']
        indexes = [
            models.Index(fields=['session', 'status'], name='bookings_bo_session_7d1c2e_idx'),
            models.Index(fields=['learner', 'session'], name='bookings_bo_learner_3f9a41_idx'),
        ]

    def __str__(self):
        return f"{self.learner_name or self.learner_id} -> {self.session_title} ({self.status})"

    @property
    def is_active(self):
        return self.status in self.ACTIVE_STATUSES
