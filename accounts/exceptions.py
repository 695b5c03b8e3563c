# accounts/exceptions.py

# Fixed, human-readable text for each auth failure code
AUTH_ERROR_MESSAGES = {
    'invalid-email': "Invalid email or password. Please check your credentials and try again.",
    'invalid-credential': "Invalid email or password. Please check your credentials and try again.",
    'user-disabled': "This user account has been disabled.",
    'email-already-in-use': "This email address is already in use.",
    'weak-password': "The password is too weak. Please use a stronger password.",
    'too-many-requests': (
        "Access to this account has been temporarily disabled due to many failed login attempts. "
        "You can try again later or reset your password."
    ),
    'role-immutable': "Your role can't be changed after signing up.",
    'misconfigured': "Sign-in is not configured correctly on this server. Please contact support.",
}

DEFAULT_AUTH_ERROR = "An unexpected error occurred. Please try again."


def auth_error_message(code):
    return AUTH_ERROR_MESSAGES.get(code, DEFAULT_AUTH_ERROR)


class AuthError(Exception):
    """Raised by the account commands; ``code`` picks the user-facing message."""

    def __init__(self, code, detail=None):
        self.code = code
        self.detail = detail
        super().__init__(auth_error_message(code))

    @property
    def message(self):
        return auth_error_message(self.code)
