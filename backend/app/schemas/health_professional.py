"""
Schémas Pydantic pour les professionnels de santé.
contact est libre (souvent un email), il n'est donc pas validé comme EmailStr.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import from_utc_naive, required_text


class HealthProfessionalCreate(BaseModel):
    name: str
    specialty: str
    contact: str
    phone: str
    status: str

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "name": "Larissa Mendes",
                "specialty": "Nutricionista",
                "contact": "lm.nutri@gmail.com",
                "phone": "48 9999 1234",
                "status": "on",
            }]
        }
    }

    @field_validator("name", "specialty", "contact", "phone", "status")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v)


class HealthProfessionalUpdate(BaseModel):
    name: Optional[str] = None
    specialty: Optional[str] = None
    contact: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None

    @field_validator("name", "specialty", "contact", "phone", "status")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return required_text(v)


class HealthProfessionalResponse(BaseModel):
    id: uuid.UUID
    name: str
    specialty: str
    contact: str
    phone: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return from_utc_naive(v)
