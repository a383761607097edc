"""
Modèle SQLAlchemy pour les rendez-vous de santé.

student et professional sont des noms en texte libre : aucune clé étrangère
vers students ou prof_saude.
"""

import uuid
from sqlalchemy import Column, DateTime, String, Text, Uuid

from app.database import Base, utcnow


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    specialty = Column(String(100), nullable=False)
    comments = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    student = Column(String(200), nullable=False)
    professional = Column(String(200), nullable=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
