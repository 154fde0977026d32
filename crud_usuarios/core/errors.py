"""Error Hierarchy — typed, categorized exceptions for every failure the API reports.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory) and http_status
    - to_response() produces the failure envelope {"error": ..., "details"?: ...}
    - details only carries text that is safe to show (validation problems, driver messages)

Design Decisions:
    - Single hierarchy with UsuariosError base: one global handler renders them all
      (ADR: uniform error shape)
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class UsuariosError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        details: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the REST failure envelope."""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(UsuariosError):
    """Malformed, missing or out-of-range client data."""
    def __init__(self, message: str, field: str | None = None, details: str | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION, 400, details,
        )
        self.field = field


class UsuarioNotFoundError(UsuariosError):
    """No row matches the requested id."""
    def __init__(self, usuario_id: int):
        super().__init__(
            "Usuario no encontrado", "USUARIO_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.usuario_id = usuario_id


class EmailDuplicadoError(UsuariosError):
    """Unique constraint on email violated."""
    def __init__(self, email: str | None = None):
        super().__init__(
            "El email ya está registrado", "EMAIL_CONFLICT",
            ErrorCategory.CONFLICT, 409,
        )
        self.email = email


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(UsuariosError):
    """Anything unexpected: lost connectivity, driver failures, bugs."""
    def __init__(self, message: str = "Error interno del servidor", details: str | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL, 500, details,
        )
