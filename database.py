"""Database configuration and utilities."""
from contextlib import contextmanager
from typing import Optional

from sqlmodel import Session, SQLModel, create_engine

import config
from models import Setting

# Database engine
engine = create_engine(
    f"sqlite:///{config.DB_PATH}", connect_args={"check_same_thread": False}
)


@contextmanager
def get_session():
    """Get a database session context manager."""
    with Session(engine) as session:
        yield session


def init_db() -> None:
    """Initialize database tables."""
    config.DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)


def get_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a setting value by key."""
    with get_session() as s:
        row = s.get(Setting, key)
        return row.value if row else default


def set_setting(key: str, value: str) -> None:
    """Set a setting value."""
    with get_session() as s:
        row = s.get(Setting, key)
        if row:
            row.value = value
        else:
            s.add(Setting(key=key, value=value))
        s.commit()
