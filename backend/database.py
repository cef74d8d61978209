# backend/database.py
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker


Base = declarative_base()


def sqlite_url(database_url: str) -> str:
    """Accept either a bare file path (inventory.db) or a full SQLAlchemy URL."""
    if "://" in database_url:
        return database_url
    return f"sqlite:///{database_url}"


def make_engine(database_url: str) -> Engine:
    url = sqlite_url(database_url)

    # Konfiguracja zależna od bazy
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False} # Tylko dla SQLite
    else:
        connect_args = {}

    return create_engine(url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_store(request: Request):
    """Store instance built at startup and attached to the app."""
    return request.app.state.store
