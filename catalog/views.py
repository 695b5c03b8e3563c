# catalog/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.db import DatabaseError
from django.http import HttpResponseForbidden, JsonResponse
from django.shortcuts import render, get_object_or_404, redirect
from django.views.decorators.http import require_GET, require_POST

from accounts.decorators import teacher_required
from bookings import services as booking_services
from .forms import SessionForm, SessionFilterForm
from .geocoding import GeocodingError, lookup_pincode
from .models import Session
from .services import discover_sessions

logger = logging.getLogger(__name__)

SESSIONS_PER_PAGE = 9


"""
The public session listing with its filter bar. Anyone can browse;
booking needs an account.
"""
def discover_view(request):
    form = SessionFilterForm(request.GET or None)
    filters = form.cleaned_data if form.is_valid() else {}
    paginator = Paginator(discover_sessions(filters), SESSIONS_PER_PAGE)
    page = paginator.get_page(request.GET.get('page'))
    context = {'form': form, 'page': page, 'sessions': page.object_list}
    return render(request, 'catalog/discover.html', context)


"""
One session's page. Besides the listing itself it works out what the
booking button should say for the visitor (own session, full, already
requested) and, for the owning teacher only, lists who is confirmed.
"""
def session_detail_view(request, pk):
    session = get_object_or_404(Session, pk=pk)
    is_owner = session.is_owned_by(request.user)

    existing_booking = None
    if request.user.is_authenticated and not is_owner:
        existing_booking = booking_services.latest_booking_for(request.user, session)

    attendees = []
    if is_owner:
        attendees = booking_services.list_confirmed_attendees(session)

    context = {
        'session': session,
        'is_owner': is_owner,
        'existing_booking': existing_booking,
        'has_active_booking': existing_booking is not None and existing_booking.is_active,
        'is_full': booking_services.is_session_full(session),
        'confirmed_count': booking_services.confirmed_count(session),
        'attendees': attendees,
    }
    return render(request, 'catalog/session_detail.html', context)


@teacher_required
def create_session_view(request):
    if request.method == 'POST':
        form = SessionForm(request.POST)
        if form.is_valid():
            session = form.save(commit=False)
            session.teacher = request.user
            try:
                session.save()
            except DatabaseError as e:
                logger.exception("Session creation failed for teacher %s", request.user.pk)
                messages.error(request, f"Could not create session: {e}.")
            else:
                logger.info("Session %s created by teacher %s", session.pk, request.user.pk)
                messages.success(request, f'Your session "{session.title}" has been created.')
                return redirect('teaching_dashboard')
    else:
        form = SessionForm()
    return render(request, 'catalog/session_form.html', {'form': form, 'editing': False})


@teacher_required
def edit_session_view(request, pk):
    session = get_object_or_404(Session, pk=pk)
    # Security check: only the owner can edit
    if not session.is_owned_by(request.user):
        return HttpResponseForbidden("You can only edit your own sessions.")

    if request.method == 'POST':
        form = SessionForm(request.POST, instance=session, editing=True)
        if form.is_valid():
            try:
                form.save()
            except DatabaseError as e:
                logger.exception("Session %s update failed", session.pk)
                messages.error(request, f"Could not update session: {e}.")
            else:
                messages.success(request, "Session updated.")
                return redirect('teaching_dashboard')
    else:
        form = SessionForm(instance=session, editing=True)
    return render(request, 'catalog/session_form.html', {'form': form, 'editing': True, 'session': session})


@teacher_required
@require_POST
def delete_session_view(request, pk):
    session = get_object_or_404(Session, pk=pk)
    # Security check: only the owner can delete
    if not session.is_owned_by(request.user):
        return HttpResponseForbidden()
    try:
        session.delete()
    except DatabaseError as e:
        logger.exception("Session %s delete failed", pk)
        messages.error(request, f"Could not delete the session: {e}.")
    else:
        messages.success(request, "The session has been successfully deleted.")
    return redirect('teaching_dashboard')


"""
Teacher home: their own sessions plus every booking request against
them, with the pending ones split out so they can be answered first.
"""
@teacher_required
def teaching_dashboard_view(request):
    my_sessions = Session.objects.filter(teacher=request.user).order_by('-created_at')
    pending_requests, past_requests = booking_services.list_teacher_requests(request.user)
    context = {
        'my_sessions': my_sessions,
        'pending_requests': pending_requests,
        'past_requests': past_requests,
    }
    return render(request, 'catalog/teaching_dashboard.html', context)


"""
JSON endpoint behind the "Find on map" button of the session form.
Returns the coordinates for a pincode, or an error message with a 400.
"""
@login_required
@require_GET
def geocode_pincode_view(request):
    try:
        result = lookup_pincode(request.GET.get('pincode', ''))
    except GeocodingError as e:
        return JsonResponse({'error': str(e)}, status=400)
    return JsonResponse(result)
