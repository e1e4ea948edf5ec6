import os

from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy import create_engine


Base = declarative_base()

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def make_session_factory(database_url: str):
    """Create the engine for ``database_url``, make sure the tables exist and
    return a session factory bound to it."""
    kwargs = {"future": True, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in _MEMORY_URLS:
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        elif database_url.startswith("sqlite:///"):
            folder = os.path.dirname(database_url[len("sqlite:///"):])
            if folder:
                os.makedirs(folder, exist_ok=True)

    engine = create_engine(database_url, **kwargs)

    from .models import models  # noqa: F401  registers tables on Base
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
