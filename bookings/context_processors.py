# bookings/context_processors.py

from .models import BookingRequest

"""
Runs on every page load. Teachers get the number of booking requests
still waiting for an answer, which the base template shows as the red
badge next to "Teaching".
RT: The badge is then kept current by the notification websocket.
"""
def pending_requests_count(request):
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated or not user.is_teacher:
        return {}

    count = BookingRequest.objects.filter(
        teacher=user,
        status=BookingRequest.Status.PENDING,
    ).count()

    return {'pending_requests_count': count}
