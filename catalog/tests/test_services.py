from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from catalog.models import Session
from catalog.services import available_sessions_for_ai, discover_sessions


def test_discover_lists_only_confirmed_sessions_newest_first(make_session):
    older = make_session(title='Older confirmed session')
    newer = make_session(title='Newer confirmed session')
    make_session(title='Still pending session', status=Session.Status.PENDING)
    make_session(title='Cancelled session', status=Session.Status.CANCELLED)

    assert list(discover_sessions()) == [newer, older]


def test_discover_filters_combine(make_session):
    cheap_music = make_session(title='Guitar basics', category='Music', price=Decimal('100'))
    make_session(title='Violin masterclass', category='Music', price=Decimal('900'))
    make_session(title='Bread baking', category='Cooking', price=Decimal('100'))

    result = discover_sessions({'category': 'Music', 'max_price': Decimal('500')})
    assert list(result) == [cheap_music]


def test_discover_search_matches_teacher_and_location(make_session):
    session = make_session(location='Koramangala park')
    assert list(discover_sessions({'q': 'koramangala'})) == [session]
    assert list(discover_sessions({'q': 'tara'})) == [session]
    assert list(discover_sessions({'q': 'nothing like this'})) == []


def test_discover_date_filter(make_session):
    day = timezone.now() + timedelta(days=3)
    on_day = make_session(date_time=day)
    make_session(date_time=day + timedelta(days=2))
    assert list(discover_sessions({'date': timezone.localtime(day).date()})) == [on_day]


def test_session_copies_teacher_display_fields(session, teacher):
    assert session.teacher_name == 'Tara Teacher'
    teacher.name = 'Tara T.'
    teacher.save()
    session.save()
    assert session.teacher_name == 'Tara T.'


def test_available_sessions_for_ai_shape_and_limit(make_session):
    for i in range(3):
        make_session(title=f'Session number {i}')
    make_session(title='Not yet confirmed', status=Session.Status.PENDING)

    result = available_sessions_for_ai(limit=2)
    assert len(result) == 2
    assert result[0]['title'] == 'Session number 2'
    assert isinstance(result[0]['id'], str)
    assert isinstance(result[0]['price'], float)
    assert set(result[0]) == {'id', 'title', 'description', 'category', 'location', 'date_time', 'price'}
