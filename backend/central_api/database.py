"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides the
request-scoped session dependency used by the controllers.

Referential restrictions between tables are declared on the models and
enforced by the database. SQLite only honours them when the
`foreign_keys` pragma is switched on, which is done for every new
connection below.
"""

from typing import Any

from sqlalchemy import event
from sqlmodel import SQLModel, Session, create_engine

from .config import settings


def _build_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    eng = create_engine(url, echo=settings.SQL_ECHO, connect_args=connect_args)
    if url.startswith("sqlite"):
        @event.listens_for(eng, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return eng


engine = _build_engine(settings.DATABASE_URL)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Intended for local development and tests; deployments that need
    schema evolution should run a proper migration tool instead.
    """
    # registers the table classes on SQLModel.metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
