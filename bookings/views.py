# bookings/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpResponseForbidden
from django.shortcuts import render, get_object_or_404, redirect
from django.views.decorators.http import require_POST

from accounts.decorators import learner_required, teacher_required
from catalog.models import Session
from .exceptions import BookingError
from .models import BookingRequest
from .services import cancel_booking, list_my_bookings, request_booking, respond_to_booking

logger = logging.getLogger(__name__)


"""
The "Request to book" button on a session page. Refusals (own session,
full, already requested) come back as a notification on the same page;
nothing is retried.
"""
@learner_required
@require_POST
def request_booking_view(request, session_id):
    session = get_object_or_404(Session, pk=session_id)
    try:
        request_booking(request.user, session)
    except BookingError as e:
        messages.warning(request, str(e))
    except DatabaseError as e:
        logger.exception("Booking request failed for session %s", session_id)
        messages.error(request, f"Could not submit your booking request: {e}")
    else:
        messages.success(request, f'Your request for "{session.title}" has been sent.')
    return redirect('session_detail', pk=session.pk)


@learner_required
def my_bookings_view(request):
    try:
        bookings = list_my_bookings(request.user)
    except DatabaseError as e:
        logger.exception("Could not load bookings for learner %s", request.user.pk)
        messages.error(request, f"Could not fetch your bookings: {e}")
        bookings = []
    return render(request, 'bookings/my_bookings.html', {'bookings': bookings})


"""
Accept/decline buttons on the teaching dashboard. Only the teacher
named on the request gets past the service check.
"""
@teacher_required
@require_POST
def respond_to_booking_view(request, pk, decision):
    booking = get_object_or_404(BookingRequest, pk=pk)
    if booking.teacher_id != request.user.pk:
        return HttpResponseForbidden()
    try:
        respond_to_booking(booking, request.user, decision)
    except (BookingError, ValueError) as e:
        messages.error(request, str(e))
    except DatabaseError as e:
        logger.exception("Updating booking %s to %s failed", pk, decision)
        messages.error(request, f"Could not update booking request status: {e}.")
    else:
        messages.success(request, f"The booking request has been {decision}.")
    return redirect('teaching_dashboard')


@login_required
@require_POST
def cancel_booking_view(request, pk):
    booking = get_object_or_404(BookingRequest, pk=pk)
    if request.user.pk not in (booking.learner_id, booking.teacher_id):
        return HttpResponseForbidden()
    try:
        cancel_booking(booking, request.user)
    except BookingError as e:
        messages.error(request, str(e))
    except DatabaseError as e:
        logger.exception("Cancelling booking %s failed", pk)
        messages.error(request, f"Could not cancel the booking: {e}.")
    else:
        messages.success(request, "The booking has been cancelled.")
    if request.user.is_teacher:
        return redirect('teaching_dashboard')
    return redirect('my_bookings')
