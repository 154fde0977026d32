"""API description and unmatched-route fallback."""

import pytest

from crud_usuarios.api.routes.docs import API_ROUTES


async def test_root_describes_the_api(client):
    res = await client.get("/")
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "API CRUD de Usuarios"
    assert body["version"] == "1.0.0"
    assert set(body["endpoints"]) == set(API_ROUTES)
    assert body["ejemplo_usuario"]["email"] == "juan@email.com"


def test_api_routes_lists_seven_routes():
    assert len(API_ROUTES) == 7
    assert "GET /usuarios/buscar/:termino" in API_ROUTES


@pytest.mark.parametrize("method, path", [
    ("GET", "/no-existe"),
    ("POST", "/usuarios/1/extra"),
    ("PATCH", "/usuarios/1"),
    ("DELETE", "/usuarios"),
])
async def test_unmatched_route_returns_404_with_routes(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {
        "error": "Ruta no encontrada",
        "available_routes": list(API_ROUTES),
    }
