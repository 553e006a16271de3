# app/system_services/create_note.py
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import NotFoundError, ValidationError
from app.storage.storage_provider import StorageProvider
from app.system_models.note_model.note_model import Note
from app.system_models.note_model.note_schemas import NoteCreate, NoteSubmission
from app.system_models.patient_model.patient_model import Patient
from app.system_services.read_notes import get_note

logger = logging.getLogger(__name__)

DEFAULT_AUDIO_FILENAME = "recording.webm"


async def prepare_note(submission: NoteSubmission, storage: StorageProvider) -> NoteCreate:
    """
    Validate a raw submission and normalize it into a NoteCreate.

    - text notes keep textContent verbatim and have no transcription
    - audio notes store the trimmed transcript in both raw_content and
      transcription; attached audio goes through the storage provider
    - summary always starts empty
    """
    if not submission.patient_id:
        logger.warning("Rejected note submission without patient id")
        raise ValidationError("Patient ID is required")

    audio_data = None

    if submission.input_type == "text" and submission.text_content:
        raw_content = submission.text_content
        transcription = None
    elif submission.input_type == "audio" and submission.transcription and submission.transcription.strip():
        raw_content = submission.transcription.strip()
        transcription = raw_content
        if submission.audio_bytes is not None:
            audio_data = await storage.store(
                submission.audio_bytes,
                submission.audio_filename or DEFAULT_AUDIO_FILENAME,
            )
    else:
        logger.warning(
            f"Rejected note submission for {submission.patient_id}: input_type={submission.input_type!r}"
        )
        raise ValidationError("Invalid input")

    return NoteCreate(
        patient_id=submission.patient_id,
        input_type=submission.input_type,
        raw_content=raw_content,
        transcription=transcription,
        summary=None,
        audio_data=audio_data,
    )


async def create_note(db: AsyncSession, note: NoteCreate) -> Note:
    """Insert a note and return it with its patient loaded."""
    if await db.get(Patient, note.patient_id) is None:
        raise NotFoundError("Patient not found")

    db_note = Note(**note.model_dump())
    db.add(db_note)
    await db.commit()
    logger.info(f"Created {note.input_type} note {db_note.id} for patient {note.patient_id}")
    return await get_note(db, db_note.id)
