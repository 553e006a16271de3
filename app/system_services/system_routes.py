# app/system_services/system_routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.storage.storage_provider import StorageProvider, get_storage
from app.system_models.note_model.note_schemas import NoteResponse, NoteSubmission
from app.system_models.patient_model.patient_schemas import PatientResponse
from app.system_services.create_note import create_note, prepare_note
from app.system_services.create_patient import list_patients
from app.system_services.read_notes import get_note, get_note_audio, list_notes

router = APIRouter()


@router.get("/notes", response_model=List[NoteResponse])
async def list_notes_endpoint(db: AsyncSession = Depends(get_db)):
    """List every note with its patient, newest first."""
    return await list_notes(db)


@router.post("/notes", response_model=NoteResponse)
async def create_note_endpoint(
    patient_id: Optional[str] = Form(None, alias="patientId"),
    input_type: Optional[str] = Form(None, alias="inputType"),
    text_content: Optional[str] = Form(None, alias="textContent"),
    transcription: Optional[str] = Form(None),
    audio_file: Optional[UploadFile] = File(None, alias="audioFile"),
    db: AsyncSession = Depends(get_db),
    storage: StorageProvider = Depends(get_storage),
):
    """
    Create a note from a multipart submission.

    Text notes need textContent; audio notes need a transcription and may
    attach the recorded audioFile.
    """
    submission = NoteSubmission(
        patient_id=patient_id,
        input_type=input_type,
        text_content=text_content,
        transcription=transcription,
    )
    if audio_file is not None:
        submission.audio_bytes = await audio_file.read()
        submission.audio_filename = audio_file.filename

    note = await prepare_note(submission, storage)
    return await create_note(db, note)


@router.get("/notes/{note_id}", response_model=NoteResponse)
async def get_note_endpoint(note_id: str, db: AsyncSession = Depends(get_db)):
    """Fetch one note with its patient."""
    return await get_note(db, note_id)


@router.get("/notes/{note_id}/audio")
async def get_note_audio_endpoint(
    note_id: str,
    db: AsyncSession = Depends(get_db),
    storage: StorageProvider = Depends(get_storage),
):
    """Stream back the recording attached to an audio note."""
    audio = await get_note_audio(db, note_id, storage)
    return Response(content=audio, media_type="audio/webm")


@router.get("/patients", response_model=List[PatientResponse])
async def list_patients_endpoint(db: AsyncSession = Depends(get_db)):
    """List every patient by name."""
    return await list_patients(db)
