"""
Schémas Pydantic pour les événements.

Note : on importe datetime en tant que module (dt) pour éviter le conflit de nommage
entre le champ `date` et le type `datetime.date` dans Pydantic v2.
"""

import uuid
import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import from_utc_naive, required_text, to_utc_naive


class EventCreate(BaseModel):
    description: str
    comment: str
    date: dt.datetime

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "description": "Evento Exemplo",
                "comment": "Comentários sobre o evento",
                "date": "2023-11-05T14:00:00Z",
            }]
        }
    }

    @field_validator("description", "comment")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: dt.datetime) -> dt.datetime:
        return to_utc_naive(v)


class EventUpdate(BaseModel):
    description: Optional[str] = None
    comment: Optional[str] = None
    date: Optional[dt.datetime] = None

    @field_validator("description", "comment")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return required_text(v)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[dt.datetime]) -> dt.datetime:
        return to_utc_naive(v)


class EventResponse(BaseModel):
    id: uuid.UUID
    description: str
    comment: str
    date: dt.datetime
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("date", "created_at", "updated_at")
    @classmethod
    def dates_in_utc(cls, v: Optional[dt.datetime]) -> Optional[dt.datetime]:
        return from_utc_naive(v)
