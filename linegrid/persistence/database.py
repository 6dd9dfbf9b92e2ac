"""
Database setup for saved tables.
Uses SQLite by default; set LINEGRID_DATABASE_URL (see linegrid.config) for anything else.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from linegrid.config import DATABASE_URL

Base = declarative_base()


def make_engine(url: str = DATABASE_URL):
    # SQLite needs check_same_thread=False; other backends do not use that arg
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def make_session_factory(url: str = DATABASE_URL) -> sessionmaker:
    """Create the tables if needed and return a session factory bound to `url`."""
    engine = make_engine(url)
    init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine):
    """Create all tables."""
    # Registers SavedTable on Base.metadata
    from linegrid.persistence import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
