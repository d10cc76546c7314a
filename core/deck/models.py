"""
SQLAlchemy ORM Models for the preference store.

A single key-value table; the deck only ever uses one row.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Preference(Base):
    """
    One persisted preference slot (e.g. the active category list).
    """
    __tablename__ = 'preferences'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(Text, nullable=False)  # JSON-encoded payload
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Preference({self.key})>"
