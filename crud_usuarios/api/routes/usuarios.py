"""Usuarios Routes — list, read, create, partially update, delete and search users.

Invariants:
    - Path ids are parsed by core/validate_usuario.py; a non-integer id is a 400 before any query
    - Payload validation runs before any write (fail fast, zero side effects)
    - Request bodies are read raw and validated inside the handler: update reports a
      missing row (404) before any payload problem, and a missing body counts as {}
    - Update looks the row up and writes it in one transaction (row locked FOR UPDATE)
    - Every handler runs inside _handler_boundary: API errors pass through,
      anything else becomes InternalError with the handler's fixed message

Design Decisions:
    - One repository per request, built on the request's session (get_db dependency)
    - Success envelope built inline: {"success": True, ...payload}
"""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from crud_usuarios.api.error_handlers import format_validation_errors
from crud_usuarios.core.errors import (
    InternalError, InvalidInputError, UsuarioNotFoundError, UsuariosError,
)
from crud_usuarios.core.validate_usuario import (
    build_changes, parse_usuario_id, validate_new_usuario,
)
from crud_usuarios.infrastructure.database import get_db
from crud_usuarios.infrastructure.usuario_repository import UsuarioRepository
from crud_usuarios.models.usuario import Usuario
from crud_usuarios.schemas.usuario import (
    UsuarioCreate, UsuarioResponse, UsuarioUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/usuarios", tags=["usuarios"])


def get_repository(db: AsyncSession = Depends(get_db)) -> UsuarioRepository:
    return UsuarioRepository(db)


@asynccontextmanager
async def _handler_boundary(message: str):
    try:
        yield
    except UsuariosError:
        raise
    except Exception as e:
        logger.error(f"{message}: {e}", exc_info=True)
        raise InternalError(message, details=str(e)) from e


def _serialize(usuario: Usuario) -> dict:
    return UsuarioResponse.model_validate(usuario).model_dump()


def _json_body(schema: type[BaseModel]) -> dict:
    """OpenAPI request body for handlers that read the JSON themselves."""
    return {"requestBody": {"content": {
        "application/json": {"schema": schema.model_json_schema()},
    }}}


async def _read_payload(request: Request, schema: type[BaseModel]) -> BaseModel:
    """Parse the JSON body into `schema`; an empty body is an empty object."""
    raw = await request.body()
    try:
        data = json.loads(raw) if raw.strip() else {}
    except ValueError as e:
        raise InvalidInputError(
            "Datos de entrada inválidos", details=f"JSON inválido: {e}",
        ) from e
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(
            "Datos de entrada inválidos",
            details=format_validation_errors(e.errors()),
        ) from e


@router.get("")
async def list_usuarios(repo: UsuarioRepository = Depends(get_repository)):
    """List every user ordered by id."""
    async with _handler_boundary("Error al obtener usuarios"):
        usuarios = await repo.list_all()
    return {
        "success": True,
        "count": len(usuarios),
        "data": [_serialize(u) for u in usuarios],
    }


@router.get("/buscar/{termino}")
async def search_usuarios(
    termino: str, repo: UsuarioRepository = Depends(get_repository),
):
    """Case-insensitive search over nombre and email."""
    async with _handler_boundary("Error en la búsqueda"):
        usuarios = await repo.search(termino)
    return {
        "success": True,
        "count": len(usuarios),
        "termino_busqueda": termino,
        "data": [_serialize(u) for u in usuarios],
    }


@router.get("/{usuario_id}")
async def get_usuario(
    usuario_id: str, repo: UsuarioRepository = Depends(get_repository),
):
    async with _handler_boundary("Error al obtener usuario"):
        parsed_id = parse_usuario_id(usuario_id)
        usuario = await repo.get(parsed_id)
        if usuario is None:
            raise UsuarioNotFoundError(parsed_id)
    return {"success": True, "data": _serialize(usuario)}


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    openapi_extra=_json_body(UsuarioCreate),
)
async def create_usuario(
    request: Request, repo: UsuarioRepository = Depends(get_repository),
):
    """Create a user; storage assigns the id."""
    async with _handler_boundary("Error al crear usuario"):
        body = await _read_payload(request, UsuarioCreate)
        values = validate_new_usuario(body.model_dump())
        usuario = await repo.create(values)
    logger.info("Usuario created", extra={"usuario_id": usuario.id})
    return {
        "success": True,
        "message": "Usuario creado exitosamente",
        "data": _serialize(usuario),
    }


@router.put("/{usuario_id}", openapi_extra=_json_body(UsuarioUpdate))
async def update_usuario(
    usuario_id: str,
    request: Request,
    repo: UsuarioRepository = Depends(get_repository),
):
    """Partial update — only the fields present in the body change."""
    async with _handler_boundary("Error al actualizar usuario"):
        parsed_id = parse_usuario_id(usuario_id)
        usuario = await repo.get(parsed_id, for_update=True)
        if usuario is None:
            raise UsuarioNotFoundError(parsed_id)
        body = await _read_payload(request, UsuarioUpdate)
        changes = build_changes(body.supplied())
        usuario = await repo.update(usuario, changes)
    logger.info(
        f"Usuario updated: {', '.join(changes)}",
        extra={"usuario_id": parsed_id},
    )
    return {
        "success": True,
        "message": "Usuario actualizado exitosamente",
        "data": _serialize(usuario),
    }


@router.delete("/{usuario_id}")
async def delete_usuario(
    usuario_id: str, repo: UsuarioRepository = Depends(get_repository),
):
    """Hard delete; the response carries the row as it was."""
    async with _handler_boundary("Error al eliminar usuario"):
        parsed_id = parse_usuario_id(usuario_id)
        usuario = await repo.delete(parsed_id)
        if usuario is None:
            raise UsuarioNotFoundError(parsed_id)
    logger.info("Usuario deleted", extra={"usuario_id": parsed_id})
    return {
        "success": True,
        "message": "Usuario eliminado exitosamente",
        "data": _serialize(usuario),
    }
