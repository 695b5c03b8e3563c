# bookings/exceptions.py


class BookingError(Exception):
    """Base class for booking workflow refusals; the message is user-facing."""


class OwnSessionNotAllowed(BookingError):
    def __init__(self):
        super().__init__("You cannot book your own session.")


class SessionFull(BookingError):
    def __init__(self):
        super().__init__("This session has reached its maximum capacity.")


class AlreadyRequested(BookingError):
    def __init__(self, status):
        self.status = status
        super().__init__(f"Your booking status is: {status}.")


class NotBookingParty(BookingError):
    def __init__(self):
        super().__init__("You are not allowed to change this booking.")


class InvalidTransition(BookingError):
    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"A {current} booking can't become {target}.")


class TransitionNotImplemented(BookingError):
    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Moving a booking from {current} to {target} is not supported yet.")
