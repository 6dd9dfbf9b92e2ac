"""
SQLAlchemy models for saved tables.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from .database import Base


class SavedTable(Base):
    __tablename__ = "saved_tables"

    path = Column(String(255), primary_key=True)  # the path passed to save_game/load_game
    size = Column(Integer, nullable=False)
    table_state = Column(Text, nullable=False)  # JSON string from GameTable.to_json()
    saved_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
