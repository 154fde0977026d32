"""Tests for usuario validation — pure checks, no IO."""

import pytest

from crud_usuarios.core.errors import InvalidInputError
from crud_usuarios.core.validate_usuario import (
    build_changes,
    check_email_format,
    normalize_edad,
    parse_usuario_id,
    validate_new_usuario,
)


# --- parse_usuario_id ---------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), (" 7 ", 7), ("-3", -3)])
def test_parse_usuario_id_accepts_integers(raw, expected):
    assert parse_usuario_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "1e3", "1_000", "0x10", "١٢"])
def test_parse_usuario_id_rejects_non_integers(raw):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_usuario_id(raw)
    assert exc_info.value.field == "id"
    assert exc_info.value.http_status == 400


# --- check_email_format -------------------------------------------------------

@pytest.mark.parametrize("email", ["a@b.co", "juan.perez@mail.example.com", "contact@anahí.com"])
def test_valid_emails_pass(email):
    check_email_format(email)


@pytest.mark.parametrize("email", ["", "a@b", "a b@c.d", "a@b.c\n", None, 5])
def test_invalid_emails_rejected(email):
    with pytest.raises(InvalidInputError):
        check_email_format(email)


# --- normalize_edad -----------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (None, None), ("", None), (0, 0), (120, 120), (30.0, 30), ("45", 45),
])
def test_normalize_edad_accepts(value, expected):
    assert normalize_edad(value) == expected


@pytest.mark.parametrize("value", [-1, 121, 30.5, "treinta", True, False, {}, float("nan")])
def test_normalize_edad_rejects(value):
    with pytest.raises(InvalidInputError) as exc_info:
        normalize_edad(value)
    assert exc_info.value.message == "Edad debe ser un número entre 0 y 120"


# --- validate_new_usuario -----------------------------------------------------

def test_new_usuario_defaults_optionals_to_none():
    row = validate_new_usuario({"nombre": "Ana", "email": "ana@x.com"})
    assert row == {"nombre": "Ana", "email": "ana@x.com", "edad": None, "telefono": None}


def test_new_usuario_empty_telefono_is_none():
    row = validate_new_usuario({"nombre": "Ana", "email": "ana@x.com", "telefono": ""})
    assert row["telefono"] is None


def test_new_usuario_keeps_values_verbatim():
    row = validate_new_usuario({
        "nombre": " Ana ", "email": "ana@x.com", "edad": 0, "telefono": "+52 1",
    })
    assert row == {"nombre": " Ana ", "email": "ana@x.com", "edad": 0, "telefono": "+52 1"}


def test_new_usuario_checks_required_before_edad():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_usuario({"nombre": "Ana", "edad": 500})
    assert exc_info.value.message == "Nombre y email son obligatorios"


def test_new_usuario_checks_email_before_edad():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_usuario({"nombre": "Ana", "email": "bad", "edad": 500})
    assert exc_info.value.field == "email"


# --- build_changes ------------------------------------------------------------

def test_build_changes_only_supplied_fields():
    assert build_changes({"telefono": "555"}) == {"telefono": "555"}


def test_build_changes_null_clears_optionals():
    assert build_changes({"edad": None, "telefono": None}) == {"edad": None, "telefono": None}


def test_build_changes_normalizes_edad():
    assert build_changes({"edad": "33"}) == {"edad": 33}


def test_build_changes_empty_raises():
    with pytest.raises(InvalidInputError) as exc_info:
        build_changes({})
    assert "al menos un campo" in exc_info.value.message


@pytest.mark.parametrize("supplied", [{"nombre": None}, {"nombre": ""}, {"email": None}])
def test_build_changes_rejects_clearing_required_fields(supplied):
    with pytest.raises(InvalidInputError):
        build_changes(supplied)


def test_build_changes_checks_email_before_edad():
    with pytest.raises(InvalidInputError) as exc_info:
        build_changes({"email": "bad", "edad": -5})
    assert exc_info.value.field == "email"
