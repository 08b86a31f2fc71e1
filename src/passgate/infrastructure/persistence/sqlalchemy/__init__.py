"""SQLAlchemy implementation for passgate persistence.

Provides:
- Base: Declarative base for all models
- UserModel, AppModel: table models
- SQLAlchemyStorage: implementation of the storage capabilities
- build_engine, build_session_maker, create_schema: setup helpers

Examples
--------
engine = build_engine("sqlite+aiosqlite:///./storage/passgate.db")
await create_schema(engine)
storage = SQLAlchemyStorage(build_session_maker(engine))
"""

from passgate.infrastructure.persistence.sqlalchemy.base import Base
from passgate.infrastructure.persistence.sqlalchemy.engine import (
    build_engine,
    build_session_maker,
    create_schema,
)
from passgate.infrastructure.persistence.sqlalchemy.models import AppModel, UserModel
from passgate.infrastructure.persistence.sqlalchemy.storage import SQLAlchemyStorage

__all__ = [
    "AppModel",
    "Base",
    "SQLAlchemyStorage",
    "UserModel",
    "build_engine",
    "build_session_maker",
    "create_schema",
]
