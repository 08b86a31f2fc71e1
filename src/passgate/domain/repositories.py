"""Storage capability interfaces.

Each interface exposes only what ``AuthService`` needs from persistence,
so each can be implemented and mocked on its own. A single storage class
may implement all of them.
"""

from abc import ABC, abstractmethod

from passgate.domain.models import App, User


class UserSaver(ABC):
    """Capability to persist new users."""

    @abstractmethod
    async def save_user(self, email: str, password_hash: bytes) -> int:
        """
        Persist a new user.

        Parameters
        ----------
        email
            The user's email, unique across the directory
        password_hash
            The bcrypt password hash

        Returns
        -------
        The id assigned to the new user

        Raises
        ------
        UserExistsError
            If the email is already taken
        """


class UserProvider(ABC):
    """Capability to read users."""

    @abstractmethod
    async def user(self, email: str) -> User:
        """
        Fetch a user by email.

        Raises
        ------
        UserNotFoundError
            If no user has this email
        """

    @abstractmethod
    async def is_admin(self, user_id: int) -> bool:
        """
        Read the admin flag of a user.

        Raises
        ------
        UserNotFoundError
            If no user has this id
        """


class AppProvider(ABC):
    """Capability to read applications."""

    @abstractmethod
    async def app(self, app_id: int) -> App:
        """
        Fetch an application by id.

        Raises
        ------
        AppNotFoundError
            If no application has this id
        """
