"""
Database handle for the task store.

The ``Database`` class owns a pooled async SQLAlchemy engine.  It is
constructed once per process (see ``main.create_app``), initialised on
startup and disposed on shutdown; request handlers receive it through
the ``get_database`` dependency instead of importing a module-level
pool.

The store is MySQL in production (``mysql+aiomysql``) and a local
SQLite file otherwise (``sqlite+aiosqlite``).  Queries are written as
plain SQL with bound parameters in ``services``; this module only
deals with connections, the schema and error translation.
"""

from __future__ import annotations

import logging
import ssl
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import Request
from sqlalchemy import Column, Integer, MetaData, Table, Text, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from .config import SSL_DISABLED, SSL_REQUIRED, SSL_VERIFY, Settings

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_URL = "sqlite+aiosqlite:///tasks.db"

metadata = MetaData()

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("text", Text, nullable=False),
)


class StoreError(Exception):
    """Raised when the task store cannot be reached or a statement fails."""


def build_database_url(settings: Settings) -> str:
    """Return the SQLAlchemy URL described by ``settings``.

    ``DATABASE_URL`` wins when set.  Otherwise a MySQL URL is built from
    the ``DB_*`` variables if ``DB_HOST`` is present, and a local SQLite
    file is used as the last resort.
    """
    if settings.database_url:
        return settings.database_url
    if settings.db_host:
        url = URL.create(
            "mysql+aiomysql",
            username=settings.db_user or None,
            password=settings.db_password or None,
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name or None,
        )
        return url.render_as_string(hide_password=False)
    return DEFAULT_SQLITE_URL


def build_connect_args(settings: Settings, url: str) -> Dict[str, Any]:
    """Return driver connect arguments carrying the TLS mode.

    ``required`` encrypts the connection without checking the server
    certificate; ``verify`` checks it against the system trust store.
    TLS is ignored for SQLite.
    """
    if url.startswith("sqlite") or settings.db_ssl == SSL_DISABLED:
        return {}
    if settings.db_ssl == SSL_REQUIRED:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return {"ssl": context}
    if settings.db_ssl == SSL_VERIFY:
        return {"ssl": ssl.create_default_context()}
    raise ValueError(f"Unknown DB_SSL mode: {settings.db_ssl!r}")


class Database:
    """Pooled connection handle to the task store."""

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 10,
        pool_timeout: float = 30.0,
        connect_args: Optional[Dict[str, Any]] = None,
        echo: bool = False,
    ) -> None:
        self.url = url
        # max_overflow=0 caps concurrent connections at pool_size; callers
        # beyond that wait up to pool_timeout for a free connection.
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            connect_args=connect_args or {},
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a database handle from application settings."""
        url = build_database_url(settings)
        return cls(
            url,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout,
            connect_args=build_connect_args(settings, url),
        )

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """Yield a pooled connection inside a transaction.

        The transaction commits when the block exits normally and rolls
        back otherwise.  The connection goes back to the pool in both
        cases.  Driver and pool errors surface as ``StoreError``.
        """
        try:
            async with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    async def init(self) -> None:
        """Create the ``tasks`` table if it does not exist yet."""
        async with self.connection() as conn:
            await conn.run_sync(metadata.create_all, checkfirst=True)

    async def ping(self) -> None:
        """Acquire one pooled connection, run ``SELECT 1`` and release it."""
        async with self.connection() as conn:
            await conn.execute(text("SELECT 1"))

    async def check_connection(self) -> bool:
        """Ping the store and log the outcome.

        Returns ``True`` when the store answered.  Failures are logged
        with their traceback and reported as ``False``.
        """
        try:
            await self.ping()
        except StoreError:
            logger.exception("Failed to connect to the task store")
            return False
        logger.info("Connected to the task store")
        return True

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the database attached at startup."""
    return request.app.state.database
