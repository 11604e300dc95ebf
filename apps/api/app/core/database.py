from contextlib import contextmanager
from typing import Iterator

from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

# Load environment variables once, at import time
load_dotenv()

from app.core.config import settings  # noqa: E402

DATABASE_URL = settings.database_url
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL is not set. Check your .env file.")


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine; SQLite connections get foreign keys switched on."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, pool_pre_ping=True, **kwargs)

    if engine.dialect.name == "sqlite":
        # SQLite ignores ON DELETE CASCADE / RESTRICT unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
)

class Base(DeclarativeBase):
    pass

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    One transaction scope: commit when the block exits cleanly,
    roll back on any exception and re-raise it.
    """
    try:
        yield db
        db.commit()
    except BaseException:
        db.rollback()
        raise
