"""
Schémas Pydantic pour les enseignants.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.common import from_utc_naive, required_text


class TeacherCreate(BaseModel):
    name: str
    subject: str
    phone: str
    email: EmailStr
    status: str

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "name": "Professor Xavier",
                "subject": "Ciências",
                "phone": "48 9999 1234",
                "email": "xavier@escola.com",
                "status": "ativo",
            }]
        }
    }

    @field_validator("name", "subject", "phone", "status")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v)


class TeacherUpdate(BaseModel):
    name: Optional[str] = None
    subject: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    status: Optional[str] = None

    @field_validator("name", "subject", "phone", "status")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return required_text(v)

    @field_validator("email")
    @classmethod
    def email_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("L'email ne peut pas être nul.")
        return v


class TeacherResponse(BaseModel):
    id: uuid.UUID
    name: str
    subject: str
    phone: str
    email: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return from_utc_naive(v)
