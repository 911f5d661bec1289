"""Database models."""
from notes_app.models.note import Note
from notes_app.models.webhook import EventType, WebhookConfig, WebhookEventSetting

__all__ = ["EventType", "Note", "WebhookConfig", "WebhookEventSetting"]
