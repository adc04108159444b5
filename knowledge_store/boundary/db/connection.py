"""
Database connection management.

Turns a connection target into an aiosqlite URL and builds the async engine
and session factory every store works through.

Dependencies: sqlalchemy, aiosqlite, knowledge_store.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from knowledge_store.configs import get_settings
from knowledge_store.core.exceptions import ValidationError

MEMORY_TARGET = ":memory:"
ASYNC_SQLITE_DRIVER = "sqlite+aiosqlite"
SQLITE_URL_PREFIX = f"{ASYNC_SQLITE_DRIVER}:///"


def build_database_url(connection_target: str) -> str:
    """
    Resolve a connection target to a SQLAlchemy URL.

    Accepts a filesystem path, ":memory:", or an already-formed
    sqlite+aiosqlite URL, which is returned unchanged. Anything without
    "://" is a path, even if it starts with "sqlite".

    Args:
        connection_target: Path, in-memory designator, or URL

    Returns:
        str: sqlite+aiosqlite URL

    Raises:
        ValidationError: If the target is None or blank, or a URL for
            another driver

    Usage:
        build_database_url("/var/data/knowledge.db")
        # -> "sqlite+aiosqlite:////var/data/knowledge.db"
    """
    if connection_target is None or not connection_target.strip():
        raise ValidationError(
            "Connection target cannot be null or empty",
            field="connection_target",
        )
    if "://" in connection_target:
        try:
            drivername = make_url(connection_target).drivername
        except ArgumentError as exc:
            raise ValidationError(
                "Connection target is not a valid URL",
                field="connection_target",
            ) from exc
        if drivername != ASYNC_SQLITE_DRIVER:
            raise ValidationError(
                f"Connection URL must use the {ASYNC_SQLITE_DRIVER} driver",
                field="connection_target",
                details={"driver": drivername},
            )
        return connection_target
    return f"{SQLITE_URL_PREFIX}{connection_target}"


def is_memory_url(url: str) -> bool:
    """Return True if the URL points at an in-process SQLite database."""
    database = make_url(url).database
    return database in (None, "", MEMORY_TARGET)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign keys off; cascades depend on this per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_store_engine(
    connection_target: str,
    busy_timeout: float | None = None,
    echo: bool | None = None,
) -> AsyncEngine:
    """
    Create the async engine for a connection target.

    File databases use NullPool so each operation opens and closes its own
    connection; nothing is held between calls. The in-memory database only
    exists while its connection is open, so it uses a single StaticPool
    connection shared by everything bound to the engine.

    Every new connection gets PRAGMA foreign_keys=ON.

    Args:
        connection_target: Path, ":memory:", or sqlite URL
        busy_timeout: Seconds to wait on a locked database (defaults to settings)
        echo: Echo SQL statements (defaults to settings)

    Returns:
        AsyncEngine: Configured engine

    Raises:
        ValidationError: If the connection target is None or blank
    """
    db_config = get_settings().database
    url = build_database_url(connection_target)
    connect_args = {
        "timeout": busy_timeout if busy_timeout is not None else db_config.busy_timeout,
    }
    echo_sql = echo if echo is not None else db_config.echo_sql

    if is_memory_url(url):
        connect_args["check_same_thread"] = False
        engine = create_async_engine(
            url,
            echo=echo_sql,
            connect_args=connect_args,
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            url,
            echo=echo_sql,
            connect_args=connect_args,
            poolclass=NullPool,
        )

    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    return engine


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory bound to a store engine.

    expire_on_commit=False keeps loaded rows usable after the session
    closes, since stores convert them to domain models afterwards.

    Args:
        engine: Engine from create_store_engine

    Returns:
        async_sessionmaker: Session factory for short units of work

    Usage:
        SessionFactory = get_session_factory(engine)
        async with SessionFactory() as session:
            async with session.begin():
                session.add(row)
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
