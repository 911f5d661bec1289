"""Webhook request and response schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from notes_app.models.webhook import EventType


class WebhookURLUpdate(BaseModel):
    """Schema for setting the webhook destination URL."""

    url: str = Field(..., max_length=2048)


class WebhookEventUpdate(BaseModel):
    """Schema for toggling one event kind."""

    event: EventType
    enabled: bool


class WebhookEventResponse(BaseModel):
    """Schema for event setting responses."""

    id: int
    webhook_config_id: int
    event: EventType
    enabled: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WebhookConfigResponse(BaseModel):
    """Schema for webhook configuration responses."""

    id: int
    user_id: str
    url: str
    created_at: datetime
    updated_at: datetime
    events: List[WebhookEventResponse] = []

    class Config:
        from_attributes = True


class WebhookTestResponse(BaseModel):
    """Response from webhook test."""

    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    response_time: Optional[float] = None
