"""Webhook configuration models for note event notifications."""
import enum

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from notes_app.database import Base


class EventType(str, enum.Enum):
    """Note actions that can trigger a webhook notification."""

    NOTE_CREATE = "NOTE_CREATE"
    NOTE_READ = "NOTE_READ"
    NOTE_UPDATE = "NOTE_UPDATE"
    NOTE_DELETE = "NOTE_DELETE"


class WebhookConfig(Base):
    """A user's webhook destination. At most one per user."""

    __tablename__ = "webhook_configs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, unique=True)
    url = Column(String(2048), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    events = relationship(
        "WebhookEventSetting",
        back_populates="config",
        cascade="all, delete-orphan",
        order_by="WebhookEventSetting.id",
    )

    def __repr__(self):
        return f"<WebhookConfig(id={self.id}, user_id='{self.user_id}', url='{self.url}')>"


class WebhookEventSetting(Base):
    """Enabled flag for one event kind of one webhook configuration."""

    __tablename__ = "webhook_event_settings"

    id = Column(Integer, primary_key=True, index=True)
    webhook_config_id = Column(
        Integer,
        ForeignKey("webhook_configs.id", ondelete="CASCADE"),
        nullable=False,
    )
    event = Column(
        Enum(EventType, native_enum=False, length=20, name="event_type"),
        nullable=False,
    )
    enabled = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    config = relationship("WebhookConfig", back_populates="events")

    __table_args__ = (
        UniqueConstraint(
            "webhook_config_id", "event", name="uq_webhook_event_settings_config_event"
        ),
    )
