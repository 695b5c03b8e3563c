import logging

import pytest

from bookings.exceptions import (
    AlreadyRequested,
    InvalidTransition,
    NotBookingParty,
    OwnSessionNotAllowed,
    SessionFull,
    TransitionNotImplemented,
)
from bookings.models import BookingRequest
from bookings.services import (
    cancel_booking,
    complete_booking,
    confirmed_count,
    is_session_full,
    list_confirmed_attendees,
    list_my_bookings,
    request_booking,
    respond_to_booking,
)

Status = BookingRequest.Status


def test_request_booking_creates_pending_with_snapshot(learner, session):
    booking = request_booking(learner, session)

    assert booking.status == Status.PENDING
    assert booking.session_id_snapshot == session.pk
    assert booking.session_title == session.title
    assert booking.session_location == session.location
    assert booking.session_date_time == session.date_time
    assert booking.learner_name == learner.name
    assert booking.teacher_id == session.teacher_id
    assert booking.teacher_name == session.teacher_name


def test_teacher_cannot_book_own_session(teacher, session):
    with pytest.raises(OwnSessionNotAllowed):
        request_booking(teacher, session)
    assert not BookingRequest.objects.exists()


@pytest.mark.parametrize('status', [Status.PENDING, Status.CONFIRMED])
def test_second_active_request_is_refused_before_any_write(learner, session, status):
    first = request_booking(learner, session)
    BookingRequest.objects.filter(pk=first.pk).update(status=status)

    with pytest.raises(AlreadyRequested) as exc:
        request_booking(learner, session)
    assert exc.value.status == status
    assert BookingRequest.objects.count() == 1


def test_learner_can_request_again_after_cancelling(learner, session):
    first = request_booking(learner, session)
    cancel_booking(first, learner)
    second = request_booking(learner, session)
    assert second.pk != first.pk
    assert second.status == Status.PENDING


def test_capacity_one_session_fills_after_confirmation(learner, other_learner, make_session):
    session = make_session(max_participants=1)
    booking = request_booking(learner, session)
    assert booking.status == Status.PENDING
    assert not is_session_full(session)

    respond_to_booking(booking, session.teacher, Status.CONFIRMED)
    assert booking.status == Status.CONFIRMED
    assert is_session_full(session)

    with pytest.raises(SessionFull):
        request_booking(other_learner, session)


def test_session_without_limit_never_fills(learner, make_session):
    session = make_session(max_participants=None)
    booking = request_booking(learner, session)
    respond_to_booking(booking, session.teacher, Status.CONFIRMED)
    assert not is_session_full(session)


def test_confirming_past_capacity_is_allowed_and_logged(learner, other_learner, make_session, caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger('bookings'), 'propagate', True)
    session = make_session(max_participants=1)
    first = request_booking(learner, session)
    second = request_booking(other_learner, session)

    respond_to_booking(first, session.teacher, Status.CONFIRMED)
    with caplog.at_level('WARNING', logger='bookings'):
        respond_to_booking(second, session.teacher, Status.CONFIRMED)

    assert confirmed_count(session) == 2
    assert 'beyond capacity' in caplog.text


def test_confirming_does_not_touch_other_pending_requests(learner, other_learner, make_session):
    session = make_session(max_participants=1)
    first = request_booking(learner, session)
    second = request_booking(other_learner, session)
    respond_to_booking(first, session.teacher, Status.CONFIRMED)

    second.refresh_from_db()
    assert second.status == Status.PENDING


def test_only_the_sessions_teacher_may_respond(learner, session, make_user):
    booking = request_booking(learner, session)
    stranger = make_user('stan@example.com', role='teacher')
    with pytest.raises(NotBookingParty):
        respond_to_booking(booking, stranger, Status.CONFIRMED)


def test_respond_rejects_unknown_decision(learner, session):
    booking = request_booking(learner, session)
    with pytest.raises(ValueError):
        respond_to_booking(booking, session.teacher, 'maybe')


def test_rejected_request_cannot_be_confirmed(learner, session):
    booking = request_booking(learner, session)
    respond_to_booking(booking, session.teacher, Status.REJECTED)
    with pytest.raises(InvalidTransition):
        respond_to_booking(booking, session.teacher, Status.CONFIRMED)


def test_cancel_sets_side_specific_status(learner, other_learner, session):
    by_learner = request_booking(learner, session)
    by_teacher = request_booking(other_learner, session)

    cancel_booking(by_learner, learner)
    cancel_booking(by_teacher, session.teacher)

    assert by_learner.status == Status.CANCELLED_BY_LEARNER
    assert by_teacher.status == Status.CANCELLED_BY_TEACHER


def test_outsider_cannot_cancel(learner, other_learner, session):
    booking = request_booking(learner, session)
    with pytest.raises(NotBookingParty):
        cancel_booking(booking, other_learner)


def test_completion_is_not_implemented(learner, session):
    booking = request_booking(learner, session)
    respond_to_booking(booking, session.teacher, Status.CONFIRMED)
    with pytest.raises(TransitionNotImplemented):
        complete_booking(booking, session.teacher)
    booking.refresh_from_db()
    assert booking.status == Status.CONFIRMED


def test_attendees_are_confirmed_requests_only(learner, other_learner, session):
    confirmed = request_booking(learner, session)
    request_booking(other_learner, session)
    respond_to_booking(confirmed, session.teacher, Status.CONFIRMED)
    assert list_confirmed_attendees(session) == [confirmed]


def test_my_bookings_prefers_live_session_fields(learner, session):
    request_booking(learner, session)
    session.title = 'Watercolor: renamed'
    session.save()

    [view] = list_my_bookings(learner)
    assert view.is_live
    assert view.title == 'Watercolor: renamed'
    assert view.category == session.category


def test_my_bookings_falls_back_to_snapshot_when_session_is_gone(learner, session):
    booking = request_booking(learner, session)
    session_id = session.pk
    session.delete()

    [view] = list_my_bookings(learner)
    assert view.source == 'snapshot'
    assert view.session_id == session_id
    assert view.title == 'Watercolor for Beginners'
    assert view.booking.pk == booking.pk
