# warm_admin/db/session.py
"""
Database engine and connection management.
Provides scoped connections for the provisioning script.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Union

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from warm_admin.core.exceptions import ConnectivityError, PersistenceError
from warm_admin.models.admin import Admin

log = logging.getLogger("warm_admin.database")


# ────────────────────────────────────────────
# SQLAlchemy Engine
# ────────────────────────────────────────────
def make_engine(database_url: str) -> Engine:
    """
    Engine for a one-shot script: pre-ping on checkout, no SQL echo.

    Raises ConnectivityError for URLs SQLAlchemy cannot even load a
    dialect/driver for.
    """
    kwargs = {"pool_pre_ping": True, "echo": False}
    if database_url.startswith("mysql"):
        kwargs["pool_recycle"] = 3600
    try:
        return create_engine(database_url, **kwargs)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise ConnectivityError(f"Invalid database URL: {e}") from e


@contextmanager
def engine_scope(database: Union[str, Engine]) -> Iterator[Engine]:
    """
    Yield an engine for `database`.

    Engines built here from a URL are disposed on exit; an Engine passed
    in belongs to the caller and is left alone.
    """
    if isinstance(database, Engine):
        yield database
        return

    engine = make_engine(database)
    try:
        yield engine
    finally:
        engine.dispose()


# ────────────────────────────────────────────
# Context Manager
# ────────────────────────────────────────────
@contextmanager
def open_connection(engine: Engine) -> Iterator[Connection]:
    """
    Scoped connection: always closed on exit, open transaction rolled back.

    Usage:
        with open_connection(engine) as conn:
            conn.execute(text("SELECT 1"))
            conn.commit()
    """
    try:
        conn = engine.connect()
    except DBAPIError as e:
        raise ConnectivityError(f"Cannot connect to database: {e.orig}") from e

    try:
        yield conn
    except SQLAlchemyError:
        conn.rollback()
        raise
    finally:
        conn.close()
        log.debug("Database connection released")


# ────────────────────────────────────────────
# Schema
# ────────────────────────────────────────────
def ensure_admin_table(conn: Connection) -> bool:
    """
    Create the admins table (with its unique constraints and indexes) if it
    does not exist yet.

    Returns True when the table was created by this call.
    """
    try:
        if inspect(conn).has_table(Admin.__tablename__):
            conn.rollback()
            return False

        log.info(f'Table "{Admin.__tablename__}" does not exist. Creating...')
        Admin.__table__.create(bind=conn)
        conn.commit()
    except SQLAlchemyError as e:
        conn.rollback()
        raise PersistenceError(f"Failed to create table {Admin.__tablename__}: {e}") from e

    log.info(f'✅ Table "{Admin.__tablename__}" created')
    return True
