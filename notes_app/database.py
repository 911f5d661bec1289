"""Database connection and session management."""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from notes_app.config import get_settings

settings = get_settings()


def build_engine(database_url: str, **kwargs) -> Engine:
    """
    Create an engine with per-dialect connection setup.

    ``kwargs`` go to ``create_engine`` and override the defaults below.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
    else:
        options = {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}
    options.update(kwargs)
    engine = create_engine(database_url, **options)

    @event.listens_for(engine, "connect")
    def on_connect(dbapi_connection, connection_record):
        """Enforce foreign keys on SQLite, bound statement time on PostgreSQL."""
        cursor = dbapi_connection.cursor()
        if engine.dialect.name == "sqlite":
            cursor.execute("PRAGMA foreign_keys=ON")
        elif engine.dialect.name == "postgresql":
            cursor.execute("SET statement_timeout = '30s'")
        cursor.close()

    return engine


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for getting database sessions."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
