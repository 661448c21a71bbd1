from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from trophy_cabinet.config import settings


def engine_options(database_url: str) -> dict:
    """
    Keyword arguments for create_engine, chosen by database backend.

    SQLite gets a connection usable from FastAPI's worker threads and no
    pool sizing (an in-memory database is pinned to one shared connection).
    Server databases get a sized pool with pre-ping, so connections dropped
    by the server are replaced before a request sees them.
    """
    url = make_url(database_url)
    options = {"echo": settings.DEBUG}  # Log SQL queries in debug mode

    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )
    return options


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """
    FastAPI dependency yielding one session per request.

    Services commit their own unit of work; the session is always closed
    when the request ends.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
