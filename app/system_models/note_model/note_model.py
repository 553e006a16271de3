# app/system_models/note_model/note_model.py
import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


def new_note_id() -> str:
    return str(uuid.uuid4())


class Note(Base):
    __tablename__ = "notes"

    id = Column(String, primary_key=True, default=new_note_id)
    patient_id = Column(String, ForeignKey("patients.id"), nullable=False, index=True)

    input_type = Column(String, nullable=False)  # text, audio
    raw_content = Column(Text, nullable=False)
    transcription = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)  # SOAP summary, not generated yet

    # Identifier returned by the storage provider (base64 payload for database storage)
    audio_data = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("input_type IN ('text', 'audio')", name="check_input_type_values"),
    )

    patient = relationship("Patient", back_populates="notes")

    @property
    def has_audio(self) -> bool:
        return self.audio_data is not None

    def __repr__(self):
        return f"<Note {self.id}: {self.input_type} for {self.patient_id}>"
