"""SQLAlchemy models for users and applications."""

from sqlalchemy import Boolean, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from passgate.infrastructure.persistence.sqlalchemy.base import Base, CreatedAtMixin


class UserModel(Base, CreatedAtMixin):
    """
    SQLAlchemy model for registered users.

    The unique index on ``email`` is what enforces one account per email;
    concurrent registrations race on it.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    # bcrypt hash, 60 bytes
    pass_hash: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, is_admin={self.is_admin})>"


class AppModel(Base, CreatedAtMixin):
    """
    SQLAlchemy model for applications (tenants).

    Rows are provisioned by operators; the auth core only reads them.

    Table: apps
    """

    __tablename__ = "apps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    secret: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<AppModel(id={self.id}, name={self.name})>"
