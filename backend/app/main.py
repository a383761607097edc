"""
Point d'entrée principal de l'API de gestion d'enseignement spécialisé.
Démarrage : uvicorn app.main:app --reload
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.database import close_db, init_db
from app.exceptions import ApiError
from app.resources import RESOURCES
from app.routers.resources import build_router

API_TITLE = "API de Gestão de Ensino Especial"
API_VERSION = "1.0.0"

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables au démarrage, ferme le pool à l'arrêt."""
    init_db()
    yield
    close_db()


app = FastAPI(
    title=API_TITLE,
    description="Gestion des utilisateurs, enseignants, élèves, professionnels de santé, "
                "événements et rendez-vous d'une école d'enseignement spécialisé.",
    version=API_VERSION,
    docs_url=settings.DOCS_URL,
    redoc_url=f"{settings.API_PREFIX}/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

# CORS — autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


for descriptor in RESOURCES:
    app.include_router(build_router(descriptor), prefix=settings.API_PREFIX)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Erreurs métier levées par les services → {"error": message} avec le code associé."""
    if exc.status_code >= 500:
        logger.error("%s %s → %d : %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.warning("%s %s → %d : %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Corps de requête invalide (champ obligatoire absent, email mal formé...) → 400.
    Les messages Pydantic sont concaténés champ par champ.
    """
    details = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"] if part != "body") or "body"
        details.append(f"{location} : {err['msg']}")
    message = "Données invalides — " + " ; ".join(details)
    logger.warning("%s %s → 400 : %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Route inconnue, méthode non autorisée... : même enveloppe d'erreur."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Une erreur interne est survenue."},
    )


@app.get(f"{settings.API_PREFIX}/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": API_TITLE, "version": API_VERSION}
