import logging
import re
from contextlib import asynccontextmanager
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Path, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from catalog import BookCatalog
from config import Settings, settings as default_settings
from docs import API_INFO, DOCS_URL, OPENAPI_URL, PARAM_DOCS, ROUTE_DOCS, SCHEMA_EXAMPLES
from people import NotFoundError, PeopleStore, ValidationError as PersonValidationError

logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
)
logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Bienvenidos a la base de datos de Recursos Humanos!"
MSG_CREATED = "Usuario agregado exitosamente!"
MSG_UPDATED = "Usuario actualizado correctamente"
MSG_DELETED = "Usuario eliminado exitosamente!"
MSG_MISSING_FIELDS = "nombre o edad no especificado"
MSG_NOT_FOUND = "usuario no encontrado"


# --- Models ---
class PersonModel(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": SCHEMA_EXAMPLES["person"]})

    id: int
    nombre: str
    edad: str


class PersonInputModel(BaseModel):
    # Untrusted fields; presence is checked by the store, not here
    nombre: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("nombre", "name"),
        json_schema_extra={"type": "string"},
    )
    edad: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("edad", "age"),
        json_schema_extra={"type": "string"},
    )


class MessageModel(BaseModel):
    message: str


class PersonMessageModel(MessageModel):
    usuario: PersonModel


class BookModel(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": SCHEMA_EXAMPLES["book"]})

    id: int
    title: str
    author: str


# --- Dependencies ---
def get_people_store(request: Request) -> PeopleStore:
    return request.app.state.people


def get_book_catalog(request: Request) -> BookCatalog:
    return request.app.state.books


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_id(raw: str) -> int:
    """Read the leading integer of a path id, so `1abc` addresses user 1.

    Ids without a leading integer cannot match any record and are reported
    as not found.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        raise NotFoundError("user not found")
    return int(match.group(1))


# --- Routes ---
router = APIRouter()


@router.get("/", response_class=PlainTextResponse, **ROUTE_DOCS["root"])
def read_root():
    return WELCOME_MESSAGE


@router.get("/usuarios", response_model=List[PersonModel], **ROUTE_DOCS["list_users"])
def list_users(store: PeopleStore = Depends(get_people_store)):
    return [p.to_dict() for p in store.list()]


@router.post("/usuarios", response_model=PersonMessageModel, **ROUTE_DOCS["create_user"])
def create_user(
    payload: Optional[PersonInputModel] = Body(default=None, examples=[SCHEMA_EXAMPLES["person_create"]]),
    store: PeopleStore = Depends(get_people_store),
):
    payload = payload or PersonInputModel()
    person = store.create(payload.nombre, payload.edad)
    return {"message": MSG_CREATED, "usuario": person.to_dict()}


@router.put("/usuarios/{id}", response_model=PersonMessageModel, **ROUTE_DOCS["update_user"])
def update_user(
    id: str = Path(**PARAM_DOCS["update_user"]),
    payload: Optional[PersonInputModel] = Body(default=None, examples=[SCHEMA_EXAMPLES["person_update"]]),
    store: PeopleStore = Depends(get_people_store),
):
    payload = payload or PersonInputModel()
    person = store.update(_parse_id(id), name=payload.nombre, age=payload.edad)
    return {"message": MSG_UPDATED, "usuario": person.to_dict()}


@router.delete("/usuarios/{id}", response_model=PersonMessageModel, **ROUTE_DOCS["delete_user"])
def delete_user(
    id: str = Path(**PARAM_DOCS["delete_user"]),
    store: PeopleStore = Depends(get_people_store),
):
    person = store.delete(_parse_id(id))
    return {"message": MSG_DELETED, "usuario": person.to_dict()}


@router.get("/books", response_model=List[BookModel], **ROUTE_DOCS["list_books"])
def list_books(catalog: BookCatalog = Depends(get_book_catalog)):
    return [b.to_dict() for b in catalog.list_books()]


# --- Error handlers ---
async def person_validation_error_handler(request: Request, exc: PersonValidationError):
    return JSONResponse(status_code=400, content={"message": MSG_MISSING_FIELDS})


async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": MSG_NOT_FOUND})


# --- Application ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    store: PeopleStore = app.state.people
    logger.info(
        f"{API_INFO['title']} ready: {len(store)} users, {len(app.state.books)} books, "
        f"id policy '{store.id_policy}', docs at {DOCS_URL}"
    )
    yield
    logger.info("Shutting down")


def create_app(
    store: Optional[PeopleStore] = None,
    catalog: Optional[BookCatalog] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around a people store and a book catalog.

    Both collaborators are created from ``settings`` when not supplied, and
    handlers receive them through dependencies rather than module globals.
    """
    cfg = settings or default_settings

    app = FastAPI(
        title=API_INFO["title"],
        version=API_INFO["version"],
        description=API_INFO["description"],
        docs_url=DOCS_URL,
        openapi_url=OPENAPI_URL,
        redoc_url=None,
        debug=cfg.debug,
        lifespan=lifespan,
    )
    app.state.people = store if store is not None else PeopleStore(id_policy=cfg.people_id_policy)
    app.state.books = catalog if catalog is not None else BookCatalog()

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    app.add_exception_handler(PersonValidationError, person_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.include_router(router)
    return app


app = create_app()
