# catalog/services.py

from datetime import datetime, time, timedelta

from django.db.models import Q
from django.utils import timezone

from .models import Session


"""
The learner-facing listing: confirmed sessions only, newest first,
narrowed by whichever filters were filled in. Search is a plain
case-insensitive match on title, description, teacher name and
location.
"""
def discover_sessions(filters=None):
    filters = filters or {}
    sessions = Session.objects.filter(status=Session.Status.CONFIRMED).order_by('-created_at')

    if filters.get('category'):
        sessions = sessions.filter(category=filters['category'])

    if filters.get('date'):
        tz = timezone.get_current_timezone()
        start_of_day = timezone.make_aware(datetime.combine(filters['date'], time.min), tz)
        sessions = sessions.filter(date_time__gte=start_of_day, date_time__lt=start_of_day + timedelta(days=1))

    if filters.get('min_price') is not None:
        sessions = sessions.filter(price__gte=filters['min_price'])
    if filters.get('max_price') is not None:
        sessions = sessions.filter(price__lte=filters['max_price'])

    term = (filters.get('q') or '').strip()
    if term:
        sessions = sessions.filter(
            Q(title__icontains=term) |
            Q(description__icontains=term) |
            Q(teacher_name__icontains=term) |
            Q(location__icontains=term)
        )
    return sessions


# Plain dicts for the recommendation prompt, most recent confirmed first
def available_sessions_for_ai(limit=20):
    sessions = Session.objects.filter(status=Session.Status.CONFIRMED).order_by('-created_at')[:limit]
    return [
        {
            'id': str(session.pk),
            'title': session.title or "N/A",
            'description': session.description or "N/A",
            'category': session.category or "N/A",
            'location': session.location or "N/A",
            'date_time': session.date_time.isoformat() if session.date_time else "Date TBD",
            'price': float(session.price or 0),
        }
        for session in sessions
    ]
