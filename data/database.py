from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config.defaults import DEFAULT_DATABASE_URL

Base = declarative_base()

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def make_engine(url: Optional[str] = None):
    url = url or DEFAULT_DATABASE_URL
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    if url in _MEMORY_URLS:
        kwargs["poolclass"] = StaticPool   # one shared connection keeps the in-memory DB alive
    return create_engine(url, **kwargs)


def make_session_factory(bind):
    return sessionmaker(autoflush=False, bind=bind)


def init_db(bind):
    # Import registers the tables on Base.metadata
    import data.db_models  # noqa: F401
    Base.metadata.create_all(bind=bind)


engine = make_engine()
SessionLocal = make_session_factory(engine)
