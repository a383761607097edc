"""
Schémas Pydantic pour les utilisateurs.
Le mot de passe est accepté en entrée mais n'apparaît jamais dans UserResponse.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.common import from_utc_naive, required_text


class UserCreate(BaseModel):
    """Schéma de création d'un utilisateur (POST /users)."""
    name: str
    email: EmailStr
    username: str
    password: str
    access_level: str
    status: str

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "name": "Caio Hobold",
                "email": "caio.hobold@nextfit.com.br",
                "username": "caio.hobold",
                "password": "password123",
                "access_level": "admin",
                "status": "on",
            }]
        }
    }

    @field_validator("name", "username", "access_level", "status")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return required_text(v)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le mot de passe ne peut pas être vide.")
        if "\x00" in v:
            raise ValueError("Le mot de passe contient un caractère interdit.")
        return v


class UserUpdate(BaseModel):
    """Schéma de mise à jour d'un utilisateur (PUT /users/{id}). Champs absents inchangés."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    username: Optional[str] = None
    password: Optional[str] = None
    access_level: Optional[str] = None
    status: Optional[str] = None

    @field_validator("name", "username", "access_level", "status")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        return required_text(v)

    @field_validator("email")
    @classmethod
    def email_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("L'email ne peut pas être nul.")
        return v

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ValueError("Le mot de passe ne peut pas être vide.")
        if "\x00" in v:
            raise ValueError("Le mot de passe contient un caractère interdit.")
        return v


class UserResponse(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    username: str
    access_level: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return from_utc_naive(v)
