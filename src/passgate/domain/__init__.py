"""Domain records, storage capabilities and storage failure signals."""

from passgate.domain.exceptions import (
    AppExistsError,
    AppNotFoundError,
    StorageError,
    UserExistsError,
    UserNotFoundError,
)
from passgate.domain.models import App, User
from passgate.domain.repositories import AppProvider, UserProvider, UserSaver

__all__ = [
    "App",
    "AppExistsError",
    "AppNotFoundError",
    "AppProvider",
    "StorageError",
    "User",
    "UserExistsError",
    "UserNotFoundError",
    "UserProvider",
    "UserSaver",
]
