"""Note model."""
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from notes_app.database import Base


class Note(Base):
    """A user-written text note."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    data = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self):
        return f"<Note(id={self.id}, title='{self.title}')>"
