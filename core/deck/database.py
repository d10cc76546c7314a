"""
Database - Preference Store Configuration

Resolves the database URL from the environment and builds the engine.
Uses SQLAlchemy with a local SQLite file by default.
"""

from __future__ import annotations
import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from core.deck.models import Base

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///nextcard.db"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    Falls back to a SQLite file in the working directory. In test mode the
    'nextcard.db' database name is replaced with 'nextcard_test.db'.

    Returns:
        SQLAlchemy database URL
    """
    url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    if is_test_mode():
        return url.replace("nextcard.db", "nextcard_test.db")
    return url


def get_engine(url: str | None = None) -> Engine:
    """
    Get a SQLAlchemy engine for the preference store.

    Args:
        url: Explicit database URL (defaults to get_database_url())

    Returns:
        SQLAlchemy Engine instance
    """
    db_url = url or get_database_url()
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(
        db_url,
        pool_pre_ping=True,    # Verify connections before use
        connect_args=connect_args,
        echo=False
    )


def init_db(engine: Engine) -> None:
    """
    Create the preference table if it does not exist.

    Safe to call multiple times.
    """
    Base.metadata.create_all(engine)
