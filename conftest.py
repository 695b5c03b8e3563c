from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.cache import cache
from django.test import Client
from django.utils import timezone

from accounts.models import User
from catalog.models import Session

PASSWORD = 'hive-Keeper-2024'


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user(db):
    def _make(email, role=User.Role.LEARNER, name=None, **extra):
        return User.objects.create_user(
            email=email, password=PASSWORD, name=name or email.split('@')[0].title(), role=role, **extra
        )
    return _make


@pytest.fixture
def learner(make_user):
    return make_user('lena@example.com', name='Lena Learner')


@pytest.fixture
def other_learner(make_user):
    return make_user('omar@example.com', name='Omar Other')


@pytest.fixture
def teacher(make_user):
    return make_user('tara@example.com', role=User.Role.TEACHER, name='Tara Teacher')


@pytest.fixture
def make_session(teacher):
    def _make(**fields):
        defaults = {
            'title': 'Watercolor for Beginners',
            'description': 'Learn washes, layering and simple landscapes in two hours.',
            'category': 'Arts & Crafts',
            'teacher': teacher,
            'location': 'Community Hall, Indiranagar',
            'date_time': timezone.now() + timedelta(days=7),
            'price': Decimal('250.00'),
            'max_participants': 5,
            'status': Session.Status.CONFIRMED,
        }
        defaults.update(fields)
        return Session.objects.create(**defaults)
    return _make


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def learner_client(learner):
    client = Client()
    client.force_login(learner)
    return client


@pytest.fixture
def teacher_client(teacher):
    client = Client()
    client.force_login(teacher)
    return client
