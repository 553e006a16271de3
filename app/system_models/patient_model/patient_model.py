# app/system_models/patient_model/patient_model.py
from sqlalchemy import Column, String, Date, DateTime, Text
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow

class Patient(Base):
    __tablename__ = "patients"

    # Slug of the patient's name, e.g. "john-smith"
    id = Column(String, primary_key=True, index=True)

    name = Column(String, nullable=False, index=True)
    dob = Column(Date, nullable=False)
    gender = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    address = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    notes = relationship("Note", back_populates="patient")

    def __repr__(self):
        return f"<Patient {self.id}: {self.name}>"
