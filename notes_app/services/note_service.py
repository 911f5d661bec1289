"""Note CRUD operations with webhook notification on every action."""
import logging
from typing import Any, List

from sqlalchemy.orm import Session

from notes_app.config import get_settings
from notes_app.exceptions import NotFoundError, ValidationError
from notes_app.models.note import Note
from notes_app.models.webhook import EventType
from notes_app.schemas.note import NoteResponse
from notes_app.services import webhook_service

settings = get_settings()
logger = logging.getLogger(__name__)

MIN_UPDATE_LENGTH = 2


async def _notify(db: Session, user_id: str, event: EventType, data: Any) -> None:
    """
    Run the notifier after the storage operation has committed.

    Nothing raised here reaches the caller; the committed result stands.
    """
    try:
        status = await webhook_service.notify(db, user_id, event, data)
    except Exception:
        logger.exception(f"💥 Webhook {event.value} for user {user_id} failed")
        status = webhook_service.DeliveryStatus.FAILED
    logger.debug(f"Webhook {event.value} for user {user_id}: {status.value}")


def _get_note_or_404(db: Session, note_id: int) -> Note:
    note = db.query(Note).filter(Note.id == note_id).first()
    if not note:
        raise NotFoundError(f"Note {note_id} not found")
    return note


async def create_note(db: Session, user_id: str, body: str) -> Note:
    """
    Create a note with the default title.

    Raises:
        ValidationError: If ``body`` is empty after trimming.
    """
    body = (body or "").strip()
    if not body:
        raise ValidationError("Note body must not be empty")

    note = Note(title=settings.default_note_title, data=body)
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.info(f"📝 Note {note.id} created by user {user_id}")

    await _notify(db, user_id, EventType.NOTE_CREATE, NoteResponse.model_validate(note))
    return note


async def update_note(db: Session, user_id: str, note_id: int, body: str) -> bool:
    """
    Replace a note's body. Last write wins.

    Raises:
        ValidationError: If ``body`` is shorter than 2 characters after trimming.
        NotFoundError: If the note does not exist.
    """
    body = (body or "").strip()
    if len(body) < MIN_UPDATE_LENGTH:
        raise ValidationError(
            f"Note body must be at least {MIN_UPDATE_LENGTH} characters"
        )

    note = _get_note_or_404(db, note_id)
    note.data = body
    db.commit()
    db.refresh(note)
    logger.info(f"📝 Note {note.id} updated by user {user_id}")

    await _notify(db, user_id, EventType.NOTE_UPDATE, NoteResponse.model_validate(note))
    return True


async def find_all_notes(db: Session, user_id: str) -> List[Note]:
    """Return every note. Each call is itself a NOTE_READ event."""
    notes = db.query(Note).order_by(Note.id).all()

    await _notify(
        db,
        user_id,
        EventType.NOTE_READ,
        [NoteResponse.model_validate(note) for note in notes],
    )
    return notes


async def delete_note(db: Session, user_id: str, note_id: int) -> bool:
    """
    Delete a note; the webhook receives its last-known state.

    Raises:
        NotFoundError: If the note does not exist.
    """
    note = _get_note_or_404(db, note_id)

    # Snapshot before deletion for webhook
    snapshot = NoteResponse.model_validate(note)

    db.delete(note)
    db.commit()
    logger.info(f"🗑️ Note {note_id} deleted by user {user_id}")

    await _notify(db, user_id, EventType.NOTE_DELETE, snapshot)
    return True
