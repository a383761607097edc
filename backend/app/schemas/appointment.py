"""
Schémas Pydantic pour les rendez-vous de santé.
student et professional sont des noms libres, non vérifiés contre les autres collections.
"""

import uuid
import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import from_utc_naive, required_text, to_utc_naive


class AppointmentCreate(BaseModel):
    specialty: str
    comments: str
    date: dt.datetime
    student: str
    professional: str

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "specialty": "Fisioterapeuta",
                "comments": "Realizar sessão",
                "date": "2023-08-15T16:00:00Z",
                "student": "Bingo Heeler",
                "professional": "Winton Blake",
            }]
        }
    }

    @field_validator("specialty", "comments", "student", "professional")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: dt.datetime) -> dt.datetime:
        return to_utc_naive(v)


class AppointmentUpdate(BaseModel):
    specialty: Optional[str] = None
    comments: Optional[str] = None
    date: Optional[dt.datetime] = None
    student: Optional[str] = None
    professional: Optional[str] = None

    @field_validator("specialty", "comments", "student", "professional")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return required_text(v)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[dt.datetime]) -> dt.datetime:
        return to_utc_naive(v)


class AppointmentResponse(BaseModel):
    id: uuid.UUID
    specialty: str
    comments: str
    date: dt.datetime
    student: str
    professional: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("date", "created_at", "updated_at")
    @classmethod
    def dates_in_utc(cls, v: Optional[dt.datetime]) -> Optional[dt.datetime]:
        return from_utc_naive(v)
