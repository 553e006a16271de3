# app/system_models/note_model/note_schemas.py
from typing import Optional, Literal
from pydantic import BaseModel

from app.system_models.patient_model.patient_schemas import CamelModel, PatientResponse, UtcDateTime

INPUT_TYPE = Literal["text", "audio"]


class NoteSubmission(BaseModel):
    """Raw multipart fields as received, before validation."""

    patient_id: Optional[str] = None
    input_type: Optional[str] = None
    text_content: Optional[str] = None
    transcription: Optional[str] = None
    audio_bytes: Optional[bytes] = None
    audio_filename: Optional[str] = None

class NoteCreate(BaseModel):
    patient_id: str
    input_type: INPUT_TYPE
    raw_content: str
    transcription: Optional[str] = None
    summary: Optional[str] = None
    audio_data: Optional[str] = None

class NoteResponse(CamelModel):
    id: str
    patient_id: str
    input_type: INPUT_TYPE
    raw_content: str
    transcription: Optional[str] = None
    summary: Optional[str] = None
    has_audio: bool = False
    created_at: UtcDateTime
    updated_at: UtcDateTime
    patient: PatientResponse
