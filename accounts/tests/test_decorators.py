import pytest
from django.test import Client
from django.urls import reverse


def test_learner_is_redirected_away_from_teacher_pages(learner_client):
    for name in ('teaching_dashboard', 'create_session', 'content_assistant'):
        response = learner_client.get(reverse(name))
        assert response.status_code == 302
        assert response.url == reverse('my_bookings')


def test_teacher_is_redirected_away_from_learner_pages(teacher_client):
    for name in ('my_bookings', 'recommendations'):
        response = teacher_client.get(reverse(name))
        assert response.status_code == 302
        assert response.url == reverse('teaching_dashboard')


@pytest.mark.django_db
def test_anonymous_user_is_sent_to_login_with_next():
    response = Client().get(reverse('teaching_dashboard'))
    assert response.status_code == 302
    assert response.url.startswith(reverse('login'))
    assert 'next=' in response.url
