"""Error Handlers — global exception handlers mapping failures to the error envelope.

Invariants:
    - UsuariosError → its own http_status with {"error": message, "details"?: ...}
    - RequestValidationError (parameters FastAPI validates itself) → 400 InvalidInput envelope
    - Unmatched route (Starlette 404/405) → 404 with the list of available routes
    - Exception (catch-all) → 500, never a stack trace

Design Decisions:
    - Four-layer handler: API errors, validation, routing, catch-all
    - Extracted from main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crud_usuarios.api.routes.docs import API_ROUTES
from crud_usuarios.core.errors import (
    InternalError, InvalidInputError, UsuariosError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_usuarios_error_handler(app)
    _register_validation_error_handler(app)
    _register_route_fallback_handler(app)
    _register_generic_error_handler(app)


def _register_usuarios_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UsuariosError)
    async def usuarios_error_handler(request: Request, exc: UsuariosError):
        """Handle all API errors raised by route handlers."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors as InvalidInput."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = InvalidInputError(
            "Datos de entrada inválidos",
            details=format_validation_errors(exc.errors()),
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_route_fallback_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unknown path or method → 404 listing the routes that exist."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            logger.info(
                "Route not found",
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "error": "Ruta no encontrada",
                    "available_routes": list(API_ROUTES),
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — fixed message plus the error text, no traceback."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        error = InternalError(details=str(exc))
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def format_validation_errors(errors: list) -> str:
    """Flatten Pydantic error dicts into "field: message; ..." text."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in errors
    )
