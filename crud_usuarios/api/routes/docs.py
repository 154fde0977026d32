"""API Description — root endpoint listing the available routes.

Invariants:
    - API_ROUTES is the single list of public routes (also used by the 404 fallback)
"""

from fastapi import APIRouter

from crud_usuarios import __version__

router = APIRouter(tags=["docs"])

API_ROUTES = {
    "GET /": "Documentación de la API",
    "GET /usuarios": "Obtener todos los usuarios",
    "GET /usuarios/:id": "Obtener usuario por ID",
    "POST /usuarios": "Crear nuevo usuario",
    "PUT /usuarios/:id": "Actualizar usuario",
    "DELETE /usuarios/:id": "Eliminar usuario",
    "GET /usuarios/buscar/:termino": "Buscar usuarios por nombre o email",
}

EJEMPLO_USUARIO = {
    "nombre": "Juan Pérez",
    "email": "juan@email.com",
    "edad": 25,
    "telefono": "+52-555-1234",
}


@router.get("/")
async def api_description():
    return {
        "message": "API CRUD de Usuarios",
        "version": __version__,
        "endpoints": API_ROUTES,
        "ejemplo_usuario": EJEMPLO_USUARIO,
    }
