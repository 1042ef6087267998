"""SQLAlchemy models for the cashbook database."""

import uuid
from datetime import datetime, UTC

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Date,
    Numeric,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def new_entry_id() -> str:
    """Generate an opaque entry identifier."""
    return uuid.uuid4().hex


class Entry(Base):
    """Ledger entry model."""

    __tablename__ = "entries"

    id = Column(String(32), primary_key=True, default=new_entry_id)
    title = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    kind = Column(String(6), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_entries_date", "date"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
