# app/system_services/create_patient.py
import logging
import re
from datetime import date
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.patient_model.patient_model import Patient
from app.system_models.patient_model.patient_schemas import PatientBase, PatientCreate

logger = logging.getLogger(__name__)

SEED_PATIENTS = [
    PatientBase(
        name="John Smith",
        dob=date(1985, 3, 15),
        gender="Male",
        phone="(555) 123-4567",
        address="123 Oak Street, Springfield, IL 62701",
    ),
    PatientBase(
        name="Maria Garcia",
        dob=date(1972, 8, 22),
        gender="Female",
        phone="(555) 234-5678",
        address="456 Maple Avenue, Chicago, IL 60601",
    ),
    PatientBase(
        name="Robert Johnson",
        dob=date(1990, 11, 30),
        gender="Male",
        phone="(555) 345-6789",
        address="789 Pine Road, Peoria, IL 61602",
    ),
]


def slugify_name(name: str) -> str:
    """'John Smith' -> 'john-smith'"""
    return re.sub(r"\s", "-", name.lower())


async def upsert_patient(db: AsyncSession, patient: PatientCreate) -> Patient:
    """Create the patient, or overwrite its fields when the id exists."""
    db_patient = await db.get(Patient, patient.id)
    if db_patient is None:
        db_patient = Patient(**patient.model_dump())
        db.add(db_patient)
    else:
        for field, value in patient.model_dump(exclude={"id"}).items():
            setattr(db_patient, field, value)
    await db.commit()
    await db.refresh(db_patient)
    return db_patient


async def seed_patients(db: AsyncSession) -> List[Patient]:
    """Upsert the fixed demo patients; safe to run repeatedly."""
    seeded = []
    for patient in SEED_PATIENTS:
        payload = PatientCreate(id=slugify_name(patient.name), **patient.model_dump())
        seeded.append(await upsert_patient(db, payload))
        logger.info(f"Seeded patient {payload.id}")
    return seeded


async def list_patients(db: AsyncSession) -> List[Patient]:
    """All patients ordered by name."""
    result = await db.execute(select(Patient).order_by(Patient.name.asc()))
    return list(result.scalars().all())
