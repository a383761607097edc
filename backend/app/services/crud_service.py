"""
Service CRUD générique partagé par les six ressources de l'école.

Chaque ressource est décrite par un ResourceDescriptor (modèle, schémas, champ
de recherche et mode de correspondance). CrudService applique à ce descripteur
les mêmes règles pour lister, rechercher, lire, créer, modifier et supprimer.

Erreurs levées :
- InvalidInputError : paramètre de recherche absent, date mal formée,
  identifiant mal formé, écriture refusée par la base
- NotFoundError : identifiant inconnu, recherche sans résultat
- StoreUnavailableError : toute autre erreur SQLAlchemy
"""

import datetime as dt
import enum
import logging
import re
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import InvalidInputError, NotFoundError, StoreUnavailableError

logger = logging.getLogger(__name__)

_DAY_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class SearchMode(str, enum.Enum):
    SUBSTRING = "substring"  # sous-chaîne insensible à la casse
    DAY_RANGE = "day_range"  # journée UTC complète [00:00, 24:00)


@dataclass(frozen=True)
class ResourceDescriptor:
    """Description déclarative d'un type de ressource."""
    prefix: str
    model: type
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    search_param: str
    search_field: str
    search_mode: SearchMode
    tag: str
    label: str  # singulier, ex. "Élève"
    label_plural: str  # pluriel, ex. "élèves"
    prepare: Optional[Callable[[dict], dict]] = None  # transforme le payload avant écriture

    @property
    def not_found_message(self) -> str:
        return f"{self.label} introuvable."


def parse_identifier(raw_id: str) -> uuid.UUID:
    """Convertit un identifiant de chemin en UUID, ou lève InvalidInputError."""
    try:
        return uuid.UUID(str(raw_id))
    except ValueError:
        raise InvalidInputError(f"Identifiant invalide : '{raw_id}'.")


def parse_day(value: str) -> tuple[dt.datetime, Optional[dt.datetime]]:
    """
    Convertit 'YYYY-MM-DD' en intervalle semi-ouvert [début, fin) de la journée UTC.
    Les dates sont naïves car stockées en UTC sans fuseau.
    Pour le dernier jour représentable (9999-12-31), fin vaut None : pas de borne haute.
    """
    if not _DAY_PATTERN.fullmatch(value):
        raise InvalidInputError("La date doit être au format YYYY-MM-DD.")
    try:
        day = dt.date.fromisoformat(value)
    except ValueError:
        raise InvalidInputError(f"Date inexistante : '{value}'.")
    start = dt.datetime.combine(day, dt.time.min)
    if day == dt.date.max:
        return start, None
    return start, start + dt.timedelta(days=1)


def escape_like(value: str) -> str:
    """Échappe les jokers LIKE pour une recherche littérale."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CrudService:
    """Opérations CRUD + recherche pour une ressource décrite par `descriptor`."""

    def __init__(self, descriptor: ResourceDescriptor):
        self.descriptor = descriptor
        self.model = descriptor.model

    @contextmanager
    def _store_errors(self, db: Session) -> Iterator[None]:
        """Traduit les erreurs SQLAlchemy en erreurs métier et annule la transaction."""
        try:
            yield
        except (IntegrityError, DataError) as exc:
            db.rollback()
            logger.warning("Écriture refusée sur %s : %s", self.descriptor.prefix, exc.orig)
            raise InvalidInputError(f"Données refusées par la base : {exc.orig}")
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Erreur base de données sur %s : %s", self.descriptor.prefix, exc, exc_info=True)
            raise StoreUnavailableError() from exc

    def _prepare(self, payload: dict) -> dict:
        if self.descriptor.prepare is None:
            return payload
        return self.descriptor.prepare(payload)

    def _get_or_404(self, db: Session, raw_id: str):
        resource_id = parse_identifier(raw_id)
        with self._store_errors(db):
            instance = db.get(self.model, resource_id)
        if instance is None:
            raise NotFoundError(self.descriptor.not_found_message)
        return instance

    def list_all(self, db: Session) -> list:
        """Retourne tous les enregistrements, dans l'ordre natif de la base."""
        with self._store_errors(db):
            return list(db.execute(select(self.model)).scalars().all())

    def search(self, db: Session, value: Optional[str]) -> list:
        """
        Recherche sur le champ désigné par le descripteur.
        Une recherche sans résultat lève NotFoundError (jamais de liste vide).
        """
        param = self.descriptor.search_param
        if value is None or not value.strip():
            raise InvalidInputError(f'Le paramètre "{param}" est obligatoire.')
        value = value.strip()
        if "\x00" in value:
            raise InvalidInputError(f'Le paramètre "{param}" contient un caractère interdit.')

        column = getattr(self.model, self.descriptor.search_field)
        if self.descriptor.search_mode is SearchMode.DAY_RANGE:
            start, end = parse_day(value)
            condition = column >= start
            if end is not None:
                condition = condition & (column < end)
        else:
            condition = column.ilike(f"%{escape_like(value)}%", escape="\\")

        with self._store_errors(db):
            results = list(db.execute(select(self.model).where(condition)).scalars().all())

        if not results:
            raise NotFoundError(f"Aucun résultat parmi les {self.descriptor.label_plural}.")
        return results

    def get(self, db: Session, raw_id: str):
        return self._get_or_404(db, raw_id)

    def create(self, db: Session, data: BaseModel):
        """Persiste un nouvel enregistrement ; les valeurs par défaut viennent du schéma."""
        instance = self.model(**self._prepare(data.model_dump()))
        with self._store_errors(db):
            db.add(instance)
            db.commit()
            db.refresh(instance)
        logger.info("%s créé : %s", self.descriptor.label, instance.id)
        return instance

    def update(self, db: Session, raw_id: str, data: BaseModel):
        """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
        instance = self._get_or_404(db, raw_id)

        update_data = self._prepare(data.model_dump(exclude_unset=True))
        for field, value in update_data.items():
            setattr(instance, field, value)

        with self._store_errors(db):
            db.commit()
            db.refresh(instance)
        logger.info("%s modifié : %s (%s)", self.descriptor.label, instance.id, ", ".join(update_data))
        return instance

    def delete(self, db: Session, raw_id: str) -> None:
        """Supprime définitivement un enregistrement."""
        instance = self._get_or_404(db, raw_id)
        with self._store_errors(db):
            db.delete(instance)
            db.commit()
        logger.info("%s supprimé : %s", self.descriptor.label, raw_id)
