"""Note CRUD API endpoints."""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from notes_app.api.deps import get_current_user_id
from notes_app.database import get_db
from notes_app.schemas.note import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    SuccessResponse,
)
from notes_app.services import note_service

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """
    List all notes.

    Triggers a NOTE_READ webhook when enabled.
    """
    return await note_service.find_all_notes(db, user_id)


@router.post("", response_model=NoteResponse, status_code=201)
async def create_note(
    note: NoteCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Create a new note.

    The body is trimmed and must not be empty.
    """
    return await note_service.create_note(db, user_id, note.data)


@router.put("/{note_id}", response_model=SuccessResponse)
async def update_note(
    note_id: int,
    note_update: NoteUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Replace a note's body.

    The trimmed body must be at least 2 characters long.
    """
    success = await note_service.update_note(db, user_id, note_id, note_update.data)
    return SuccessResponse(success=success)


@router.delete("/{note_id}", response_model=SuccessResponse)
async def delete_note(
    note_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a single note."""
    success = await note_service.delete_note(db, user_id, note_id)
    return SuccessResponse(success=success)
