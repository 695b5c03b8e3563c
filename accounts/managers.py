# accounts/managers.py

from django.contrib.auth.base_user import BaseUserManager

"""
Account creation for the email-login user model. Regular users
always get a role, learner unless told otherwise. Superusers are
created as teachers so the admin account can publish sessions.
"""
class CustomUserManager(BaseUserManager):

    def create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The Email must be set')
        email = self.normalize_email(email).lower()
        extra_fields.setdefault('role', 'learner')
        if extra_fields['role'] not in ('learner', 'teacher'):
            raise ValueError(f"Unknown role: {extra_fields['role']}")
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save()
        return user

    def create_superuser(self, email, password, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', 'teacher')

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        return self.create_user(email, password, **extra_fields)
