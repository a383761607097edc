"""
Configuration de la connexion à la base de données.
Un seul moteur SQLAlchemy par processus : tables créées au démarrage (init_db),
une session par requête (get_db), moteur libéré à l'arrêt (close_db).
"""

import datetime as dt
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utcnow() -> dt.datetime:
    """Horodatage UTC sans fuseau, indépendant du fuseau de la session BDD."""
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Crée les tables manquantes (une collection par type de ressource)."""
    import app.models  # noqa: F401 — enregistre les tables dans Base.metadata

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Schéma de la base initialisé (%d tables).", len(Base.metadata.tables))


def close_db() -> None:
    """Libère les connexions du pool (appelé à l'arrêt de l'API)."""
    engine.dispose()
    logger.info("Connexions à la base fermées.")
