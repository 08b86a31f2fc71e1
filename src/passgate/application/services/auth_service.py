"""Authentication service for registration, login and admin checks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from passgate.domain.exceptions import UserExistsError, UserNotFoundError
from passgate_auth import (
    AuthError,
    InternalError,
    InvalidCredentialsError,
    PasswordHashingService,
    TokenService,
    UnknownUserError,
    UserAlreadyExistsError,
)

if TYPE_CHECKING:
    from passgate.domain.repositories import AppProvider, UserProvider, UserSaver

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class AuthService:
    """
    Application service for user authentication.

    Orchestrates the storage capabilities with password hashing and token
    issuing to provide:
    - User registration
    - Login with email, password and application id
    - Admin flag lookup

    Every collaborator failure is classified here into exactly one
    ``passgate_auth`` error; nothing raised by storage escapes this class.
    The service keeps no state between calls.
    """

    def __init__(
        self,
        user_saver: UserSaver,
        user_provider: UserProvider,
        app_provider: AppProvider,
        password_service: PasswordHashingService,
        token_service: TokenService,
        token_ttl: timedelta,
        log: logging.Logger | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._user_saver = user_saver
        self._user_provider = user_provider
        self._app_provider = app_provider
        self._password_service = password_service
        self._token_service = token_service
        self._token_ttl = token_ttl
        self._log = log or logger
        self._clock = clock

    @contextmanager
    def _classified(
        self,
        action: str,
        expected: Mapping[type[Exception], type[AuthError]] | None = None,
    ) -> Iterator[None]:
        """Translate collaborator failures raised inside the block.

        Exceptions listed in ``expected`` become the mapped auth error;
        auth errors pass through; anything else becomes ``InternalError``.
        """
        try:
            yield
        except AuthError:
            raise
        except Exception as e:
            for source, target in (expected or {}).items():
                if isinstance(e, source):
                    self._log.warning("Failed to %s: %s", action, e)
                    raise target from e
            self._log.exception("Failed to %s", action)
            raise InternalError from e

    async def register(self, email: str, password: str) -> int:
        self._log.info("Registering user: %s", email)

        with self._classified("hash password"):
            password_hash = await asyncio.to_thread(self._password_service.hash, password)

        with self._classified(
            f"save user {email}",
            {UserExistsError: UserAlreadyExistsError},
        ):
            user_id = await self._user_saver.save_user(email, password_hash)

        self._log.info("User registered: %s (id: %s)", email, user_id)
        return user_id

    async def login(self, email: str, password: str, app_id: int) -> str:
        self._log.info("Logging in: %s (app: %s)", email, app_id)

        # Credentials must be verified before the application is resolved.
        with self._classified(
            f"get user {email}",
            {UserNotFoundError: InvalidCredentialsError},
        ):
            try:
                user = await self._user_provider.user(email)
            except UserNotFoundError:
                await asyncio.to_thread(self._password_service.verify_dummy, password)
                raise

        with self._classified("verify password"):
            matches = await asyncio.to_thread(
                self._password_service.verify,
                password,
                user.password_hash,
            )
        if not matches:
            self._log.warning("Invalid credentials for: %s", email)
            raise InvalidCredentialsError

        with self._classified(f"get app {app_id}"):
            app = await self._app_provider.app(app_id)

        with self._classified("issue token"):
            token = self._token_service.issue(
                user_id=user.id,
                email=user.email,
                app_id=app.id,
                app_secret=app.secret,
                ttl=self._token_ttl,
                now=self._clock(),
            )

        self._log.info("User logged in: %s (id: %s, app: %s)", email, user.id, app.id)
        return token

    async def is_admin(self, user_id: int) -> bool:
        self._log.info("Checking admin flag: %s", user_id)

        with self._classified(
            f"get admin flag {user_id}",
            {UserNotFoundError: UnknownUserError},
        ):
            is_admin = await self._user_provider.is_admin(user_id)

        self._log.info("Admin flag for %s: %s", user_id, is_admin)
        return is_admin
