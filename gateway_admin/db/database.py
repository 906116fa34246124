from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from gateway_admin.config import settings


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine; SQLite connections may be shared across request threads."""
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


# Engine and session factory for the configured database
engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_session_factory(engine)
