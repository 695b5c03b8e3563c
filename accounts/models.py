# accounts/models.py

from django.db import models
from django.contrib.auth.models import AbstractUser
from .managers import CustomUserManager
from core.images import downscale_image

AVATAR_MAX_SIZE = (800, 800)

"""
The User Directory record. One row per authenticated identity, written
once at signup and edited through the profile page afterwards. The
role decides which half of the marketplace a user sees: teachers
publish sessions and answer booking requests, learners browse and book.
The email is the login identifier, there is no username.
"""
class User(AbstractUser):
    class Role(models.TextChoices):
        LEARNER = 'learner', 'Learner'
        TEACHER = 'teacher', 'Teacher'

    username = None
    first_name = None
    last_name = None

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150)
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.LEARNER)

    phone_number = models.CharField(max_length=30, blank=True)
    bio = models.TextField(max_length=500, blank=True)
    skills = models.JSONField(default=list, blank=True)
    availability = models.CharField(max_length=255, blank=True)
    preferences = models.TextField(blank=True)
    experience = models.TextField(blank=True) # Teachers only
    avatar = models.ImageField(upload_to='profile_pictures/', blank=True, null=True)
    # Placeholder, nothing reviews these uploads yet
    id_verification = models.FileField(upload_to='id_verification/', blank=True, null=True)

    location_address = models.CharField(max_length=255, blank=True)
    location_lat = models.FloatField(blank=True, null=True)
    location_lng = models.FloatField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    objects = CustomUserManager()

    def __str__(self):
        return self.email

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name.split(' ')[0] if self.name else self.email

    @property
    def is_teacher(self):
        return self.role == self.Role.TEACHER

    @property
    def is_learner(self):
        return self.role == self.Role.LEARNER

    @property
    def avatar_url(self):
        if self.avatar:
            return self.avatar.url
        return ''

    @property
    def display_info(self):
        # The shape cached inside chat threads
        return {'name': self.name or self.email, 'avatar_url': self.avatar_url}

    # Shrinks freshly uploaded avatars before they reach storage
    def save(self, *args, **kwargs):
        if self.avatar and not getattr(self.avatar, '_committed', True):
            self.avatar = downscale_image(self.avatar, AVATAR_MAX_SIZE)
        super().save(*args, **kwargs)
