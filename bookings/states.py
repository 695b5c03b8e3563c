# bookings/states.py

from .exceptions import InvalidTransition, TransitionNotImplemented
from .models import BookingRequest

Status = BookingRequest.Status

TEACHER = 'teacher'
LEARNER = 'learner'

# (from, to) -> which side of the booking may fire it
TRANSITIONS = {
    (Status.PENDING, Status.CONFIRMED): TEACHER,
    (Status.PENDING, Status.REJECTED): TEACHER,
    (Status.PENDING, Status.CANCELLED_BY_LEARNER): LEARNER,
    (Status.CONFIRMED, Status.CANCELLED_BY_LEARNER): LEARNER,
    (Status.PENDING, Status.CANCELLED_BY_TEACHER): TEACHER,
    (Status.CONFIRMED, Status.CANCELLED_BY_TEACHER): TEACHER,
}

# Declared by the model but nothing fires them yet
UNIMPLEMENTED_TRANSITIONS = {
    (Status.CONFIRMED, Status.COMPLETED),
}


"""
Returns the side allowed to move a booking from current to target.
Raises TransitionNotImplemented for confirmed -> completed, which has
no trigger (date passing? teacher button?) and must not be guessed,
and InvalidTransition for everything else not listed above.
"""
def actor_for(current, target):
    key = (Status(current), Status(target))
    if key in UNIMPLEMENTED_TRANSITIONS:
        raise TransitionNotImplemented(current, target)
    if key not in TRANSITIONS:
        raise InvalidTransition(current, target)
    return TRANSITIONS[key]
