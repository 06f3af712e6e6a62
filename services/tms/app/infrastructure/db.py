from contextlib import contextmanager
from typing import Iterator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from app.core_settings import get_settings
from app.domain.models import Base

def make_engine(url: str, **kwargs) -> Engine:
    """Create an engine; SQLite connections get foreign-key enforcement."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, echo=False, future=True, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

settings = get_settings()
DATABASE_URL = settings.database_url
engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

def get_engine() -> Engine:
    return engine

def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit on clean exit, roll back on any exception and re-raise."""
    try:
        yield db
        db.commit()
    except BaseException:
        db.rollback()
        raise

def init_models(bind: Engine = None):
    Base.metadata.create_all(bind or engine)
