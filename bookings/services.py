# bookings/services.py

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from .exceptions import AlreadyRequested, NotBookingParty, OwnSessionNotAllowed, SessionFull
from .models import BookingRequest
from .states import LEARNER, TEACHER, actor_for

logger = logging.getLogger(__name__)

Status = BookingRequest.Status

RESPONSE_DECISIONS = (Status.CONFIRMED, Status.REJECTED)


def confirmed_count(session):
    return BookingRequest.objects.filter(session=session, status=Status.CONFIRMED).count()


# A session with no (or a zero) participant limit never fills up
def is_session_full(session):
    if not session.max_participants:
        return False
    return confirmed_count(session) >= session.max_participants


def list_confirmed_attendees(session):
    return list(
        BookingRequest.objects.filter(session=session, status=Status.CONFIRMED)
        .select_related('learner')
        .order_by('requested_at')
    )


def active_booking_for(learner, session):
    return (
        BookingRequest.objects.filter(learner=learner, session=session, status__in=BookingRequest.ACTIVE_STATUSES)
        .order_by('-requested_at', '-id')
        .first()
    )


# The most recent request of any status, for the session page's button
def latest_booking_for(learner, session):
    return BookingRequest.objects.filter(learner=learner, session=session).order_by('-requested_at', '-id').first()


"""
Files a learner's request for a session. The checks run in this order
and all of them happen before anything is written: the session's own
teacher can't book, a full session can't be booked, and a learner with
a pending or confirmed request can't file a second one.

None of this is transactional. Two requests racing each other, or a
confirmation landing between the capacity read and the insert, can
still get through; the checks only stop the ordinary repeated click.
"""
def request_booking(learner, session):
    if session.teacher_id == learner.pk:
        raise OwnSessionNotAllowed()
    if is_session_full(session):
        raise SessionFull()
    existing = active_booking_for(learner, session)
    if existing is not None:
        raise AlreadyRequested(existing.status)

    booking = BookingRequest.objects.create(
        session=session,
        session_id_snapshot=session.pk,
        session_title=session.title or "Untitled Session",
        session_date_time=session.date_time,
        session_location=session.location or "Location TBD",
        session_cover_image_url=session.cover_image_url or "",
        learner=learner,
        learner_name=learner.name or "Learner",
        teacher_id=session.teacher_id,
        teacher_name=session.teacher_name or "Unknown Teacher",
        status=Status.PENDING,
    )
    logger.info("Booking %s requested by learner %s for session %s", booking.pk, learner.pk, session.pk)
    return booking


def _move(booking, target, side):
    allowed_side = actor_for(booking.status, target)
    if allowed_side != side:
        raise NotBookingParty()
    booking.status = target
    booking.save(update_fields=['status', 'updated_at'])
    return booking


"""
The teacher's answer to a pending request. Capacity is deliberately not
re-checked here: a teacher may confirm past max_participants, and
nothing touches the other pending requests when the session fills.
Going over is only logged.
"""
def respond_to_booking(booking, teacher, decision):
    if decision not in RESPONSE_DECISIONS:
        raise ValueError(f"Unknown decision: {decision}")
    if booking.teacher_id != teacher.pk:
        raise NotBookingParty()

    if decision == Status.CONFIRMED and booking.session is not None:
        limit = booking.session.max_participants
        if limit and confirmed_count(booking.session) >= limit:
            logger.warning(
                "Booking %s confirmed beyond capacity of session %s (%d)",
                booking.pk, booking.session_id, limit,
            )

    _move(booking, decision, TEACHER)
    logger.info("Booking %s %s by teacher %s", booking.pk, decision, teacher.pk)
    return booking


def cancel_booking(booking, user):
    if user.pk == booking.learner_id:
        target, side = Status.CANCELLED_BY_LEARNER, LEARNER
    elif user.pk == booking.teacher_id:
        target, side = Status.CANCELLED_BY_TEACHER, TEACHER
    else:
        raise NotBookingParty()
    _move(booking, target, side)
    logger.info("Booking %s cancelled by %s %s", booking.pk, side, user.pk)
    return booking


# Always raises until the trigger for completion is decided
def complete_booking(booking, user):
    if user.pk != booking.teacher_id:
        raise NotBookingParty()
    return _move(booking, Status.COMPLETED, TEACHER)


@dataclass(frozen=True)
class BookingView:
    """A booking as shown on "My bookings".

    ``source`` says where the session fields came from: ``live`` when the
    session still exists and was read just now, ``snapshot`` when it's gone
    and the copy taken at request time is all there is.
    """

    booking: BookingRequest
    source: Literal['live', 'snapshot']
    session_id: int
    title: str
    date_time: Optional[datetime]
    location: str
    cover_image_url: str
    category: str = ''

    @property
    def is_live(self):
        return self.source == 'live'


def _view_for(booking):
    session = booking.session
    if session is not None:
        return BookingView(
            booking=booking,
            source='live',
            session_id=session.pk,
            title=session.title or "Session Title Missing",
            date_time=session.date_time,
            location=session.location or "Location TBD",
            cover_image_url=session.cover_image_url,
            category=session.category or "Uncategorized",
        )
    return BookingView(
        booking=booking,
        source='snapshot',
        session_id=booking.session_id_snapshot,
        title=booking.session_title or "Session Title Missing",
        date_time=booking.session_date_time,
        location=booking.session_location or "Location TBD",
        cover_image_url=booking.session_cover_image_url,
    )


def list_my_bookings(learner):
    bookings = BookingRequest.objects.filter(learner=learner).select_related('session').order_by('-requested_at', '-id')
    return [_view_for(booking) for booking in bookings]


# Everything filed against a teacher's sessions, pending first
def list_teacher_requests(teacher):
    requests = list(
        BookingRequest.objects.filter(teacher=teacher).select_related('learner', 'session').order_by('-requested_at', '-id')
    )
    pending = [r for r in requests if r.status == Status.PENDING]
    history = [r for r in requests if r.status != Status.PENDING]
    return pending, history
