"""Storage failure signals.

Raised by implementations of the storage capabilities. They never reach
callers of ``AuthService``: the service classifies them into
``passgate_auth.exceptions``.
"""


class StorageError(Exception):
    """Base exception for storage failures."""


class UserExistsError(StorageError):
    """A user with this email is already stored."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User already exists: {email}")


class UserNotFoundError(StorageError):
    """User not found."""

    def __init__(self, user_ref: str | int) -> None:
        self.user_ref = user_ref
        super().__init__(f"User not found: {user_ref}")


class AppNotFoundError(StorageError):
    """Application not found."""

    def __init__(self, app_id: int) -> None:
        self.app_id = app_id
        super().__init__(f"App not found: {app_id}")


class AppExistsError(StorageError):
    """An application with this name or id is already stored."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"App already exists: {name}")
