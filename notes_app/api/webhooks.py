"""Webhook configuration API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from notes_app.api.deps import get_current_user_id
from notes_app.database import get_db
from notes_app.schemas.webhook import (
    WebhookConfigResponse,
    WebhookEventResponse,
    WebhookEventUpdate,
    WebhookTestResponse,
    WebhookURLUpdate,
)
from notes_app.services import webhook_config_service
from notes_app.services.webhook_service import send_test_event

router = APIRouter(prefix="/api/webhook", tags=["webhooks"])


@router.get("", response_model=Optional[WebhookConfigResponse])
def get_webhook(
    user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """
    Get the current user's webhook configuration.

    Returns null when no URL has been set.
    """
    return webhook_config_service.get_webhook_config(db, user_id)


@router.put("", response_model=WebhookConfigResponse)
def set_webhook_url(
    webhook: WebhookURLUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Set the webhook URL.

    Creates the configuration on first call and overwrites the URL afterwards.
    """
    return webhook_config_service.set_webhook_url(db, user_id, webhook.url)


@router.get("/events", response_model=List[WebhookEventResponse])
def get_webhook_events(
    user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """List event toggles. Empty when no webhook is configured."""
    return webhook_config_service.get_webhook_events(db, user_id)


@router.put("/events", response_model=WebhookEventResponse)
def set_webhook_event(
    event_update: WebhookEventUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Enable or disable one event kind.

    Fails with 400 until a webhook URL has been set.
    """
    return webhook_config_service.set_webhook_event(
        db, user_id, event_update.event, event_update.enabled
    )


@router.post("/test", response_model=WebhookTestResponse)
async def test_webhook_endpoint(
    user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """
    Test the webhook by sending a sample payload.

    Sends a test event to the configured URL and returns the response status.
    """
    result = await send_test_event(db, user_id)
    return WebhookTestResponse(**result)
