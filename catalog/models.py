# catalog/models.py

from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

CATEGORIES = [
    "Arts & Crafts", "Music", "Cooking", "Technology", "Sports", "Languages",
    "Wellness", "Business", "Lifestyle", "Academics", "Other",
]

"""
A teaching offering published by a teacher: what, where, when, how
much and for how many people. The teacher's name and picture are
copied in when the session is saved so listings render without a
lookup per card. Sessions go through pending -> confirmed and end as
cancelled or completed; only confirmed ones are listed for learners.
"""
class Session(models.Model):
    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        CONFIRMED = 'confirmed', 'Confirmed'
        CANCELLED = 'cancelled', 'Cancelled'
        COMPLETED = 'completed', 'Completed'

    title = models.CharField(max_length=200)
    description = models.TextField()
    category = models.CharField(max_length=50, choices=[(c, c) for c in CATEGORIES])

    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='taught_sessions',
        limit_choices_to={'role': 'teacher'},
    )
    teacher_name = models.CharField(max_length=150, blank=True)
    teacher_avatar_url = models.CharField(max_length=500, blank=True)

    location = models.CharField(max_length=255)
    latitude = models.FloatField(
        blank=True, null=True, validators=[MinValueValidator(-90), MaxValueValidator(90)]
    )
    longitude = models.FloatField(
        blank=True, null=True, validators=[MinValueValidator(-180), MaxValueValidator(180)]
    )

    date_time = models.DateTimeField()
    price = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0'), validators=[MinValueValidator(Decimal('0'))]
    )
    max_participants = models.PositiveIntegerField(blank=True, null=True, validators=[MinValueValidator(1)])
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    cover_image_url = models.URLField(max_length=500, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"'{self.title}' by {self.teacher_name or self.teacher_id}"

    @property
    def coordinates(self):
        if self.latitude is None or self.longitude is None:
            return None
        return {'lat': self.latitude, 'lng': self.longitude}

    def is_owned_by(self, user):
        return user.is_authenticated and user.pk == self.teacher_id

    # Copies the teacher's display fields in, refreshed on every save
    def save(self, *args, **kwargs):
        if self.teacher_id:
            self.teacher_name = self.teacher.name or "Unknown Teacher"
            self.teacher_avatar_url = self.teacher.avatar_url
        super().save(*args, **kwargs)
