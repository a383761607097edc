"""
Briques partagées par les schémas Pydantic des ressources.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Enveloppe d'erreur renvoyée par tous les endpoints."""
    error: str


def _reject_nul(v: str) -> str:
    # PostgreSQL refuse le caractère NUL dans les colonnes texte
    if "\x00" in v:
        raise ValueError("Le champ contient un caractère interdit.")
    return v


def required_text(v: Optional[str]) -> str:
    """Nettoie un champ texte obligatoire : refuse null et les chaînes vides."""
    if v is None:
        raise ValueError("Le champ ne peut pas être nul.")
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return _reject_nul(v.strip())


def optional_text(v: Optional[str]) -> Optional[str]:
    return _reject_nul(v.strip()) if v else v


def to_utc_naive(v: Optional[dt.datetime]) -> dt.datetime:
    """
    Normalise une date en UTC sans fuseau, format de stockage en base.
    Une date sans fuseau est considérée comme déjà exprimée en UTC.
    """
    if v is None:
        raise ValueError("La date ne peut pas être nulle.")
    if v.tzinfo is not None:
        try:
            v = v.astimezone(dt.timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise ValueError("Date hors limites.")
    return v


def from_utc_naive(v: Optional[dt.datetime]) -> Optional[dt.datetime]:
    """Réattache le fuseau UTC à une date lue en base (sérialisée avec 'Z')."""
    if v is None:
        return v
    if v.tzinfo is None:
        return v.replace(tzinfo=dt.timezone.utc)
    return v.astimezone(dt.timezone.utc)
