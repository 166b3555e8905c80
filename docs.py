"""Static description of the public routes.

``api.py`` unpacks these entries into its route decorators; FastAPI turns
them into the OpenAPI document served under ``/api-docs``. Nothing here
touches the people store.
"""
from typing import Any, Dict

API_INFO: Dict[str, str] = {
    "title": "API de Recursos Humanos",
    "version": "1.0.0",
    "description": "Una API para gestionar usuarios y libros en una base de datos de Recursos Humanos",
}

DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs/openapi.json"

TAG_USERS = "usuarios"
TAG_BOOKS = "books"

_PERSON_EXAMPLE = {"id": 1, "nombre": "Alejandra Marin", "edad": "28"}


def _message(description: str, message: str) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"example": {"message": message}}},
    }


ROUTE_DOCS: Dict[str, Dict[str, Any]] = {
    "root": {
        "summary": "Mensaje de bienvenida",
        "include_in_schema": False,
    },
    "list_users": {
        "summary": "Obtener todos los usuarios",
        "tags": [TAG_USERS],
        "response_description": "Lista de usuarios.",
    },
    "create_user": {
        "summary": "Agregar un nuevo usuario",
        "tags": [TAG_USERS],
        "status_code": 201,
        "response_description": "Usuario agregado exitosamente.",
        "responses": {
            400: _message("Nombre o edad no especificado.", "nombre o edad no especificado"),
        },
    },
    "update_user": {
        "summary": "Actualizar un usuario existente",
        "description": "Solo se sobrescriben los campos enviados y no vacíos.",
        "tags": [TAG_USERS],
        "response_description": "Usuario actualizado correctamente.",
        "responses": {
            404: _message("Usuario no encontrado.", "usuario no encontrado"),
        },
    },
    "delete_user": {
        "summary": "Eliminar un usuario",
        "tags": [TAG_USERS],
        "response_description": "Usuario eliminado exitosamente.",
        "responses": {
            404: _message("Usuario no encontrado.", "usuario no encontrado"),
        },
    },
    "list_books": {
        "summary": "Obtener todos los libros",
        "tags": [TAG_BOOKS],
        "response_description": "Lista de libros.",
    },
}

PARAM_DOCS: Dict[str, Dict[str, Any]] = {
    "update_user": {"description": "ID del usuario a actualizar", "examples": [1]},
    "delete_user": {"description": "ID del usuario a eliminar", "examples": [2]},
}

SCHEMA_EXAMPLES: Dict[str, Any] = {
    "person": _PERSON_EXAMPLE,
    "person_create": {"nombre": "Luis", "edad": "40"},
    "person_update": {"edad": "41"},
    "book": {"id": 1, "title": "1984", "author": "George Orwell"},
}
