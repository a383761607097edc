"""
Modèle SQLAlchemy pour les événements du calendrier scolaire.
La date est stockée en UTC, sans fuseau (normalisée par les schémas).
"""

import uuid
from sqlalchemy import Column, DateTime, String, Text, Uuid

from app.database import Base, utcnow


class Event(Base):
    __tablename__ = "events"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    description = Column(String(255), nullable=False)
    comment = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
