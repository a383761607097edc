"""
Modèle SQLAlchemy pour les utilisateurs de la plateforme.
Le mot de passe n'est jamais stocké en clair : seul le hash bcrypt est conservé.
"""

import uuid
from sqlalchemy import Column, DateTime, String, Uuid

from app.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    username = Column(String(100), nullable=False)
    password_hash = Column(String(255), nullable=False)
    access_level = Column(String(50), nullable=False)  # admin, teacher, ...
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
