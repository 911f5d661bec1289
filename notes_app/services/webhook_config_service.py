"""Webhook configuration service: a user's URL and per-event toggles."""
import logging
from typing import List, Optional

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql import func

from notes_app.exceptions import PreconditionError, ValidationError
from notes_app.models.webhook import EventType, WebhookConfig, WebhookEventSetting

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyHttpUrl)


def _insert(db: Session, model):
    """Return a dialect-specific INSERT that supports ON CONFLICT."""
    if db.get_bind().dialect.name == "postgresql":
        return postgresql.insert(model)
    return sqlite.insert(model)


def validate_url(url: str) -> str:
    """
    Check that ``url`` is an absolute http(s) URL.

    Returns the stripped input unchanged otherwise, so the stored value is
    exactly what the user typed.
    """
    candidate = (url or "").strip()
    try:
        _url_adapter.validate_python(candidate)
    except PydanticValidationError:
        raise ValidationError(f"Invalid webhook URL: '{candidate}'")
    return candidate


def get_webhook_config(db: Session, user_id: str) -> Optional[WebhookConfig]:
    """Return the user's webhook configuration with its event settings, or None."""
    return (
        db.query(WebhookConfig)
        .options(selectinload(WebhookConfig.events))
        .filter(WebhookConfig.user_id == user_id)
        .first()
    )


def set_webhook_url(db: Session, user_id: str, url: str) -> WebhookConfig:
    """
    Create or replace the user's webhook URL.

    Upserts on the unique ``user_id`` so repeated calls never add rows.

    Raises:
        ValidationError: If ``url`` is not an absolute http(s) URL.
    """
    url = validate_url(url)

    stmt = _insert(db, WebhookConfig).values(user_id=user_id, url=url)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id"],
        set_={"url": stmt.excluded.url, "updated_at": func.now()},
    )
    db.execute(stmt)
    db.commit()
    logger.info(f"🪝 Webhook URL set for user {user_id}: {url}")

    return get_webhook_config(db, user_id)


def set_webhook_event(
    db: Session, user_id: str, event: EventType, enabled: bool
) -> WebhookEventSetting:
    """
    Enable or disable one event kind for the user's webhook.

    Raises:
        PreconditionError: If the user has not configured a webhook URL yet.
    """
    config = get_webhook_config(db, user_id)
    if not config:
        raise PreconditionError("Webhook host not configured")

    event = EventType(event)
    stmt = _insert(db, WebhookEventSetting).values(
        webhook_config_id=config.id, event=event, enabled=enabled
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["webhook_config_id", "event"],
        set_={"enabled": stmt.excluded.enabled, "updated_at": func.now()},
    )
    db.execute(stmt)
    db.commit()
    logger.info(
        f"🪝 Webhook event {event.value} {'enabled' if enabled else 'disabled'} for user {user_id}"
    )

    setting = (
        db.query(WebhookEventSetting)
        .filter(
            WebhookEventSetting.webhook_config_id == config.id,
            WebhookEventSetting.event == event,
        )
        .one()
    )
    return setting


def get_webhook_events(db: Session, user_id: str) -> List[WebhookEventSetting]:
    """Return the user's event settings; empty when no webhook is configured."""
    config = get_webhook_config(db, user_id)
    if not config:
        return []
    return list(config.events)
