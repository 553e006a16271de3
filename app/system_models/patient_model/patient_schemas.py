# app/system_models/patient_model/patient_schemas.py
from typing import Annotated, Optional
from datetime import date, datetime
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.helpers.time import as_utc

# Always serialized with an offset, whatever the database returns
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Serializes with the camelCase keys the web client reads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatientBase(CamelModel):
    name: str
    dob: date
    gender: str
    phone: Optional[str] = None
    address: Optional[str] = None

class PatientCreate(PatientBase):
    id: str

class PatientResponse(PatientBase):
    id: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
