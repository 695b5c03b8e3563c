# accounts/services.py

import logging

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.password_validation import validate_password
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage

from .exceptions import AuthError

logger = logging.getLogger(__name__)

User = get_user_model()

# Fields a user may change from the profile editor
EDITABLE_PROFILE_FIELDS = (
    'name', 'phone_number', 'bio', 'skills', 'availability', 'preferences',
    'experience', 'location_address', 'location_lat', 'location_lng',
)


def _failure_key(email):
    return f'signin_failures:{email.lower()}'


def sign_up(request, email, password, name, role):
    email = User.objects.normalize_email(email).lower()
    if User.objects.filter(email=email).exists():
        raise AuthError('email-already-in-use')
    candidate = User(email=email, name=name, role=role)
    try:
        validate_password(password, user=candidate)
    except ValidationError as e:
        raise AuthError('weak-password', detail=' '.join(e.messages))

    user = User.objects.create_user(email=email, password=password, name=name, role=role)
    logger.info("New %s account created: %s", role, user.pk)
    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    return user


"""
Checks the credentials and starts a session. Every failure is counted
against the email in the cache; once the count passes the configured
limit the account is locked out until the counter expires, even for
the right password.
"""
def sign_in(request, email, password):
    email = (email or '').strip().lower()
    key = _failure_key(email)
    failures = cache.get(key, 0)
    if failures >= settings.SIGNIN_MAX_FAILURES:
        logger.info("Sign-in throttled for %s", email)
        raise AuthError('too-many-requests')

    existing = User.objects.filter(email=email).first()
    if existing is not None and not existing.is_active:
        raise AuthError('user-disabled')

    user = authenticate(request, email=email, password=password)
    if user is None:
        cache.set(key, failures + 1, timeout=settings.SIGNIN_LOCKOUT_SECONDS)
        logger.info("Sign-in failed for %s (%d)", email, failures + 1)
        raise AuthError('invalid-credential')

    cache.delete(key)
    login(request, user)
    return user


def sign_out(request):
    logout(request)


def update_profile(user, **fields):
    if 'role' in fields:
        raise AuthError('role-immutable')
    unknown = set(fields) - set(EDITABLE_PROFILE_FIELDS)
    if unknown:
        raise ValueError(f"Not editable: {', '.join(sorted(unknown))}")

    if 'skills' in fields:
        skills = []
        for skill in fields['skills'] or []:
            skill = skill.strip()
            if skill and skill not in skills:
                skills.append(skill)
        fields['skills'] = skills

    for field, value in fields.items():
        setattr(user, field, value)
    if not user.is_teacher:
        user.experience = ''
    user.save()
    return user


# Stores the file in the blob store and points the profile at it
def upload_avatar(user, uploaded_file):
    user.avatar = uploaded_file
    user.save()
    return default_storage.url(user.avatar.name)
