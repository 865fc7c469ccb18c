"""Employee Validation — tests for pure input checks and row builders.

Tests cover:
    - check_required_fields flags missing, None and blank fields
    - check_employee_id accepts ASCII integers; empty ids are 400, any other spelling 404
    - build_insert_row defaults fecha_ingreso/activo when absent or null
    - build_update_fields keeps only updatable fields that were sent
"""

from datetime import datetime, timezone

import pytest

from empleados_api.core.errors import NotFoundError, ValidationError
from empleados_api.core.validate_employee import (
    build_insert_row,
    build_update_fields,
    check_employee_id,
    check_required_fields,
    to_employee_id,
)

NOW = datetime(2026, 1, 5, 8, 30, tzinfo=timezone.utc)
VALID = {"nombre": "Ana", "apellido": "Ruiz", "puesto": "Dev"}


# ─── check_required_fields ───────────────────────────────────────

def test_required_fields_pass_when_all_present():
    assert check_required_fields(VALID) is None


def test_required_fields_lists_every_missing_field():
    error = check_required_fields({"apellido": "Ruiz"})
    assert isinstance(error, ValidationError)
    assert error.fields == ["nombre", "puesto"]
    assert error.http_status == 400


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_required_fields_rejects_blank_values(blank):
    error = check_required_fields({**VALID, "puesto": blank})
    assert error is not None
    assert error.fields == ["puesto"]


def test_required_fields_rejects_empty_payload():
    assert check_required_fields({}).fields == ["nombre", "apellido", "puesto"]


# ─── check_employee_id ───────────────────────────────────────────

@pytest.mark.parametrize("raw", ["1", "42", "-3"])
def test_employee_id_accepts_ascii_integers(raw):
    assert check_employee_id(raw) is None


@pytest.mark.parametrize("raw", [None, "", "  "])
def test_employee_id_required(raw):
    error = check_employee_id(raw)
    assert isinstance(error, ValidationError)
    assert error.message == "El parámetro id es requerido"


@pytest.mark.parametrize("raw", [
    "abc", "1.5", "1e3", "0_1", "+1", " 7 ", "١",
])
def test_non_integer_id_is_not_found(raw):
    error = check_employee_id(raw)
    assert isinstance(error, NotFoundError)
    assert error.http_status == 404
    assert error.message == "Empleado no encontrado"


def test_to_employee_id_converts():
    assert to_employee_id("12") == 12


# ─── build_insert_row ────────────────────────────────────────────

def test_insert_row_defaults_fecha_and_activo():
    row = build_insert_row(VALID, NOW)
    assert row == {**VALID, "fecha_ingreso": NOW.isoformat(), "activo": True}


def test_insert_row_null_activo_defaults_to_true():
    assert build_insert_row({**VALID, "activo": None}, NOW)["activo"] is True


def test_insert_row_keeps_explicit_false_activo():
    assert build_insert_row({**VALID, "activo": False}, NOW)["activo"] is False


def test_insert_row_keeps_explicit_fecha():
    row = build_insert_row({**VALID, "fecha_ingreso": "2019-07-01"}, NOW)
    assert row["fecha_ingreso"] == "2019-07-01"


def test_insert_row_ignores_unknown_keys():
    row = build_insert_row({**VALID, "salario": 1000}, NOW)
    assert "salario" not in row


# ─── build_update_fields ─────────────────────────────────────────

def test_update_fields_keeps_only_sent_updatable_fields():
    fields = build_update_fields({"puesto": "QA", "fecha_ingreso": "2020-01-01"})
    assert fields == {"puesto": "QA"}


def test_update_fields_empty_payload_is_empty():
    assert build_update_fields({}) == {}


def test_update_fields_keeps_false_activo():
    assert build_update_fields({"activo": False}) == {"activo": False}
