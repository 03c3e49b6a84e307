"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, DateTime, String, Text

from divcalc.core.dates import now_utc
from divcalc.repositories.sqlalchemy.database import Base


class AppStateORM(Base):
    """SQLAlchemy model for one persisted state value (JSON text)."""

    __tablename__ = "app_state"

    key = Column(String(64), primary_key=True)
    value_json = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
