"""
Routers CRUD générés à partir des descripteurs de ressources.

Pour chaque ressource :
  GET    /{prefix}                 lister
  GET    /{prefix}/search?{param}= rechercher (nom ou date selon la ressource)
  GET    /{prefix}/{id}            détail
  POST   /{prefix}                 créer
  PUT    /{prefix}/{id}            modifier (partiel)
  DELETE /{prefix}/{id}            supprimer

La route littérale /search est déclarée avant /{resource_id} dans la table :
Starlette résout les routes dans l'ordre d'enregistrement.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ErrorResponse
from app.services.crud_service import CrudService, ResourceDescriptor, SearchMode


def _error(description: str) -> dict:
    return {"model": ErrorResponse, "description": description}


def build_router(descriptor: ResourceDescriptor) -> APIRouter:
    """Construit le router d'une ressource à partir de son descripteur."""
    service = CrudService(descriptor)
    create_schema = descriptor.create_schema
    update_schema = descriptor.update_schema
    response_schema = descriptor.response_schema
    label = descriptor.label.lower()
    plural = descriptor.label_plural

    if descriptor.search_mode is SearchMode.DAY_RANGE:
        search_help = "Date au format YYYY-MM-DD (journée UTC complète)"
        search_summary = f"Rechercher des {plural} par date"
    else:
        search_help = "Nom ou partie du nom (insensible à la casse)"
        search_summary = f"Rechercher des {plural} par nom"

    def list_resources(db: Session = Depends(get_db)):
        return service.list_all(db)

    def search_resources(
        value: Optional[str] = Query(None, alias=descriptor.search_param, description=search_help),
        db: Session = Depends(get_db),
    ):
        return service.search(db, value)

    def get_resource(resource_id: str, db: Session = Depends(get_db)):
        return service.get(db, resource_id)

    def create_resource(data: create_schema, db: Session = Depends(get_db)):
        return service.create(db, data)

    def update_resource(resource_id: str, data: update_schema, db: Session = Depends(get_db)):
        return service.update(db, resource_id, data)

    def delete_resource(resource_id: str, db: Session = Depends(get_db)):
        service.delete(db, resource_id)

    bad_request = _error("Paramètre, identifiant ou contenu invalide")
    not_found = _error(f"{descriptor.label} introuvable")

    # (chemin, méthode, endpoint, options) — l'ordre de cette table est l'ordre de résolution
    routes = [
        ("", "GET", list_resources, {
            "response_model": List[response_schema],
            "summary": f"Lister les {plural}",
            "responses": {500: _error("Base de données indisponible")},
        }),
        ("/search", "GET", search_resources, {
            "response_model": List[response_schema],
            "summary": search_summary,
            "responses": {400: _error(f'Paramètre "{descriptor.search_param}" absent ou invalide'),
                          404: _error("Aucun résultat")},
        }),
        ("/{resource_id}", "GET", get_resource, {
            "response_model": response_schema,
            "summary": f"Détail d'un(e) {label}",
            "responses": {400: bad_request, 404: not_found},
        }),
        ("", "POST", create_resource, {
            "response_model": response_schema,
            "status_code": 201,
            "summary": f"Créer un(e) {label}",
            "responses": {400: bad_request},
        }),
        ("/{resource_id}", "PUT", update_resource, {
            "response_model": response_schema,
            "summary": f"Modifier un(e) {label}",
            "responses": {400: bad_request, 404: not_found},
        }),
        ("/{resource_id}", "DELETE", delete_resource, {
            "status_code": 204,
            "summary": f"Supprimer un(e) {label}",
            "responses": {400: bad_request, 404: not_found},
        }),
    ]

    router = APIRouter(prefix=f"/{descriptor.prefix}", tags=[descriptor.tag])
    for path, method, endpoint, options in routes:
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            name=f"{descriptor.prefix}:{endpoint.__name__}",
            operation_id=f"{descriptor.prefix.replace('-', '_')}_{endpoint.__name__}",
            **options,
        )
    return router
