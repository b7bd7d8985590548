# yoda/errors.py
"""
Error taxonomy shared by services and API handlers.

Each error carries the HTTP status the API layer answers with; the job only
logs them.
"""


class YodaError(Exception):
    """Base error with a short, client-safe message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(YodaError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(YodaError):
    status_code = 401
    default_message = "Authentication required"


class DuplicateHandleError(AuthError):
    status_code = 400
    default_message = "User already exists with this email"


class InvalidCredentialsError(AuthError):
    default_message = "Invalid email or password"


class MissingCredentialError(AuthError):
    default_message = "Missing bearer token"


class InvalidOrExpiredCredentialError(AuthError):
    status_code = 403
    default_message = "Invalid or expired token"


class NotFoundError(YodaError):
    status_code = 404
    default_message = "Not found"


class LetterNotFoundError(NotFoundError):
    default_message = "Letter not found"


class InternalError(YodaError):
    status_code = 500
