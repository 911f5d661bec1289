"""Webhook service for triggering note event notifications."""
import enum
import logging
import time
from typing import Any, Dict, Optional

import httpx
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from notes_app.config import get_settings
from notes_app.exceptions import NotificationDeliveryFailure, PreconditionError
from notes_app.models.webhook import EventType, WebhookConfig, WebhookEventSetting
from notes_app.services.webhook_config_service import get_webhook_config

settings = get_settings()
logger = logging.getLogger(__name__)


class DeliveryStatus(str, enum.Enum):
    """Outcome of a single notify() call."""

    DELIVERED = "delivered"
    FAILED = "failed"
    SKIPPED_NO_CONFIG = "skipped_no_config"
    SKIPPED_DISABLED = "skipped_disabled"


def get_http_client() -> httpx.AsyncClient:
    """HTTP client used for every outbound webhook call."""
    return httpx.AsyncClient(timeout=settings.webhook_timeout)


def build_payload(event: EventType, data: Any) -> Dict[str, Any]:
    """Wrap event data in the outbound envelope."""
    return {
        "type": EventType(event).value,
        "timestamp": int(time.time() * 1000),
        "data": jsonable_encoder(data),
    }


def find_enabled_setting(
    config: WebhookConfig, event: EventType
) -> Optional[WebhookEventSetting]:
    """Return the first enabled setting for ``event``, if any."""
    for setting in config.events:
        if setting.event == event and setting.enabled:
            return setting
    return None


async def notify(
    db: Session, user_id: str, event: EventType, data: Any
) -> DeliveryStatus:
    """
    Send ``data`` to the user's webhook if ``event`` is enabled for it.
    Best-effort, at most once, fire-and-forget.

    Args:
        db: Database session
        user_id: Owner of the webhook configuration
        event: Event kind that just happened
        data: Entity or collection produced by the triggering operation

    Returns:
        DeliveryStatus describing what happened. Never raises on delivery
        failure; the caller's operation is unaffected.
    """
    event = EventType(event)
    config = get_webhook_config(db, user_id)
    if not config:
        return DeliveryStatus.SKIPPED_NO_CONFIG

    if not find_enabled_setting(config, event):
        return DeliveryStatus.SKIPPED_DISABLED

    url = config.url
    payload = build_payload(event, data)

    try:
        await _send_webhook(url, payload)
    except NotificationDeliveryFailure as e:
        logger.warning(f"⚠️ {e.message}")
        return DeliveryStatus.FAILED

    logger.info(f"✅ Webhook {event.value} delivered to {url}")
    return DeliveryStatus.DELIVERED


async def _send_webhook(url: str, payload: Dict[str, Any]) -> httpx.Response:
    """
    Send a single webhook request.

    Raises:
        NotificationDeliveryFailure: On transport error, timeout or non-2xx
            response.
    """
    try:
        async with get_http_client() as client:
            response = await client.post(url, json=payload)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise NotificationDeliveryFailure(url, str(e) or type(e).__name__) from e

    if not response.is_success:
        raise NotificationDeliveryFailure(
            url, f"{response.status_code} {response.reason_phrase}"
        )
    return response


async def send_test_event(db: Session, user_id: str) -> Dict[str, Any]:
    """
    Send a sample payload to the user's webhook and measure the response.

    Event toggles are ignored; only the URL has to be configured.

    Returns:
        Dict with test results including status code and response time

    Raises:
        PreconditionError: If the user has no webhook URL configured.
    """
    config = get_webhook_config(db, user_id)
    if not config:
        raise PreconditionError("Webhook host not configured")

    payload = build_payload(
        EventType.NOTE_CREATE,
        {"id": 0, "title": "Test note", "data": "This is a test webhook event"},
    )
    payload["test"] = True

    start_time = time.time()
    try:
        async with get_http_client() as client:
            response = await client.post(config.url, json=payload)
            response_time = time.time() - start_time

            return {
                "success": response.is_success,
                "status_code": response.status_code,
                "response_time": round(response_time, 3),
            }
    except httpx.TimeoutException:
        return {
            "success": False,
            "error": f"Request timeout (> {settings.webhook_timeout:g} seconds)",
            "response_time": settings.webhook_timeout,
        }
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        response_time = time.time() - start_time
        return {
            "success": False,
            "error": str(e),
            "response_time": round(response_time, 3),
        }
