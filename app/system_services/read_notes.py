# app/system_services/read_notes.py
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.shared.exceptions import NotFoundError
from app.storage.storage_provider import StorageProvider
from app.system_models.note_model.note_model import Note


async def list_notes(db: AsyncSession) -> List[Note]:
    """All notes with their patient, newest first."""
    result = await db.execute(
        select(Note)
        .options(selectinload(Note.patient))
        .order_by(Note.created_at.desc())
    )
    return list(result.scalars().all())


async def get_note(db: AsyncSession, note_id: str) -> Note:
    result = await db.execute(
        select(Note)
        .options(selectinload(Note.patient))
        .where(Note.id == note_id)
        .execution_options(populate_existing=True)
    )
    note = result.scalars().first()
    if note is None:
        raise NotFoundError("Note not found")
    return note


async def get_note_audio(db: AsyncSession, note_id: str, storage: StorageProvider) -> bytes:
    """Raw audio bytes attached to a note."""
    note = await get_note(db, note_id)
    if note.audio_data is None:
        raise NotFoundError("Note has no audio")
    return await storage.retrieve(note.audio_data)
