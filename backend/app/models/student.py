"""
Modèle SQLAlchemy pour la table students.
L'âge reste une chaîne libre, comme saisi par le secrétariat.
"""

import uuid
from sqlalchemy import Column, DateTime, String, Text, Uuid

from app.database import Base, utcnow


class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    age = Column(String(20), nullable=False)
    parents = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    special_needs = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="on")
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
