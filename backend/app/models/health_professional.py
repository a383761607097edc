"""
Modèle SQLAlchemy pour les professionnels de santé (collection prof_saude).
"""

import uuid
from sqlalchemy import Column, DateTime, String, Uuid

from app.database import Base, utcnow


class HealthProfessional(Base):
    __tablename__ = "prof_saude"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    specialty = Column(String(100), nullable=False)
    contact = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
