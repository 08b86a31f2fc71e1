"""Authentication exceptions.

These are the domain-level outcomes of the authentication core. Storage,
hashing and signing failures are classified into one of them by
``AuthService`` before they reach a caller; the transport layer maps them
to its own status codes using ``code``.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code = "AUTH_ERROR"

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    Deliberately does not say which part was wrong or whether the
    account exists.
    """

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class UserAlreadyExistsError(AuthError):
    """Raised when registering an email that is already taken."""

    code = "USER_ALREADY_EXISTS"

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class InvalidApplicationError(AuthError):
    """Raised when an application or user reference cannot be resolved."""

    code = "INVALID_APPLICATION"

    def __init__(self, message: str = "Invalid application"):
        super().__init__(message)


class UnknownUserError(InvalidApplicationError):
    """Raised by the admin lookup when the user id does not exist.

    Subclasses ``InvalidApplicationError`` so callers written against the
    older outcome keep catching it.
    """

    code = "UNKNOWN_USER"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class InternalError(AuthError):
    """Raised for any storage, hashing or signing failure.

    The message is opaque; details are only logged server-side.
    """

    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a token is invalid, expired, or malformed."""

    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
