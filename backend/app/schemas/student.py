"""
Schémas Pydantic pour les élèves.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import from_utc_naive, optional_text, required_text


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /students). Statut "on" par défaut."""
    name: str
    age: str
    parents: str
    phone: str
    special_needs: Optional[str] = None
    status: str = "on"

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "name": "Bingo Heeler",
                "age": "6",
                "parents": "Bandit Heeler e Chilli Heeler",
                "phone": "48 9696 5858",
                "special_needs": "Síndrome de Down",
                "status": "on",
            }]
        }
    }

    @field_validator("name", "age", "parents", "phone", "status")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v)

    @field_validator("special_needs")
    @classmethod
    def strip_special_needs(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class StudentUpdate(BaseModel):
    """Schéma de mise à jour d'un élève (PUT /students/{id})."""
    name: Optional[str] = None
    age: Optional[str] = None
    parents: Optional[str] = None
    phone: Optional[str] = None
    special_needs: Optional[str] = None
    status: Optional[str] = None

    @field_validator("name", "age", "parents", "phone", "status")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return required_text(v)

    @field_validator("special_needs")
    @classmethod
    def strip_special_needs(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève (GET /students)."""
    id: uuid.UUID
    name: str
    age: str
    parents: str
    phone: str
    special_needs: Optional[str]
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return from_utc_naive(v)
