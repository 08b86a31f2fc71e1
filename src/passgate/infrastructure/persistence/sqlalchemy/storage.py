"""SQLAlchemy implementation of the storage capabilities.

Implements UserSaver, UserProvider and AppProvider over one database, plus
the provisioning operations used by operator tooling.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from passgate.domain.exceptions import (
    AppExistsError,
    AppNotFoundError,
    UserExistsError,
    UserNotFoundError,
)
from passgate.domain.models import App, User
from passgate.domain.repositories import AppProvider, UserProvider, UserSaver
from passgate.infrastructure.persistence.sqlalchemy.models import AppModel, UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    message = str(error).lower()
    return "unique" in message or "duplicate" in message


class SQLAlchemyStorage(UserSaver, UserProvider, AppProvider):
    """
    SQLAlchemy implementation of the storage capabilities.

    Each operation runs in its own session and transaction, so one instance
    can be shared by any number of concurrent requests.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        """Initialize storage with a session factory.

        Parameters
        ----------
        session_maker
            Factory producing SQLAlchemy async sessions
        """
        self._session_maker = session_maker

    async def save_user(self, email: str, password_hash: bytes) -> int:
        model = UserModel(email=email, pass_hash=password_hash)

        try:
            async with self._session_maker() as session, session.begin():
                session.add(model)
                await session.flush()
                user_id = model.id
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise UserExistsError(email) from e
            raise

        logger.info("Created user: %s (email: %s)", user_id, email)
        return user_id

    async def user(self, email: str) -> User:
        stmt = select(UserModel).where(UserModel.email == email)

        async with self._session_maker() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            raise UserNotFoundError(email)

        return User(id=model.id, email=model.email, password_hash=bytes(model.pass_hash))

    async def is_admin(self, user_id: int) -> bool:
        stmt = select(UserModel.is_admin).where(UserModel.id == user_id)

        async with self._session_maker() as session:
            result = await session.execute(stmt)
            flag = result.scalar_one_or_none()

        if flag is None:
            raise UserNotFoundError(user_id)

        return bool(flag)

    async def app(self, app_id: int) -> App:
        async with self._session_maker() as session:
            model = await session.get(AppModel, app_id)

        if model is None:
            raise AppNotFoundError(app_id)

        return App(id=model.id, name=model.name, secret=model.secret)

    async def save_app(self, name: str, secret: str, app_id: int | None = None) -> App:
        """
        Provision a new application.

        Parameters
        ----------
        name
            Unique human-readable name
        secret
            Signing secret for the application's tokens
        app_id
            Explicit id; assigned by the database when omitted

        Returns
        -------
        The stored application

        Raises
        ------
        AppExistsError
            If the name or id is already taken
        """
        model = AppModel(id=app_id, name=name, secret=secret)

        try:
            async with self._session_maker() as session, session.begin():
                session.add(model)
                await session.flush()
                app = App(id=model.id, name=model.name, secret=model.secret)
        except IntegrityError as e:
            raise AppExistsError(name) from e

        logger.info("Created app: %s (name: %s)", app.id, name)
        return app

    async def list_apps(self) -> list[App]:
        stmt = select(AppModel).order_by(AppModel.id)

        async with self._session_maker() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()

        return [App(id=m.id, name=m.name, secret=m.secret) for m in models]

    async def set_admin(self, email: str, is_admin: bool) -> None:
        """
        Set or clear the admin flag of a user.

        Raises
        ------
        UserNotFoundError
            If no user has this email
        """
        stmt = update(UserModel).where(UserModel.email == email).values(is_admin=is_admin)

        async with self._session_maker() as session, session.begin():
            result = await session.execute(stmt)

        if result.rowcount == 0:
            raise UserNotFoundError(email)

        logger.info("Admin flag for %s set to %s", email, is_admin)
