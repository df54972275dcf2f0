from fastapi.testclient import TestClient

from app.core import security
from app.models import EstadoUsuario, Usuario
from conftest import usuario_payload


def test_create_user_normalizes_fields(client: TestClient):
    payload = usuario_payload(" 303330333 ", "Maria.Perez@Revtec.CR", nombre="  María ")
    response = client.post("/api/usuarios", json=payload)
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["cedula"] == "303330333"
    assert body["email"] == "maria.perez@revtec.cr"
    assert body["nombre"] == "María"
    assert body["estado"] == "activo"
    assert "password" not in body


def test_duplicate_identity_is_conflict(client: TestClient, cliente):
    same_cedula = client.post("/api/usuarios", json=usuario_payload(cliente["cedula"], "otra@revtec.cr"))
    assert same_cedula.status_code == 409
    same_email = client.post("/api/usuarios", json=usuario_payload("404440444", "ANA@revtec.cr"))
    assert same_email.status_code == 409
    assert same_email.json()["tipo"] == "conflict"


def test_short_password_is_validation_error(client: TestClient):
    response = client.post("/api/usuarios", json=usuario_payload("505550555", "corto@revtec.cr", password="123"))
    assert response.status_code == 422


def test_update_excludes_self_from_identity_check(client: TestClient, cliente, tecnico):
    base = {k: cliente[k] for k in ("nombre", "apellidos", "cedula", "email")}
    ok = client.put(f"/api/usuarios/{cliente['id']}", json={**base, "telefono": "2222-3333"})
    assert ok.status_code == 200
    assert ok.json()["telefono"] == "2222-3333"

    taken = client.put(f"/api/usuarios/{cliente['id']}", json={**base, "email": tecnico["email"]})
    assert taken.status_code == 409


def test_login(client: TestClient, cliente):
    ok = client.post("/api/usuarios/login", json={"email": "ANA@revtec.cr", "password": "secreto1"})
    assert ok.status_code == 200
    assert ok.json()["id"] == cliente["id"]

    bad = client.post("/api/usuarios/login", json={"email": "ana@revtec.cr", "password": "otra-clave"})
    assert bad.status_code == 401


def test_delete_user_with_vehicles_is_soft(client: TestClient, store, cliente, vehiculo):
    assert client.delete(f"/api/usuarios/{cliente['id']}").status_code == 204
    assert client.get(f"/api/usuarios/{cliente['id']}").status_code == 404
    assert cliente["id"] not in [u["id"] for u in client.get("/api/usuarios").json()]
    assert store.get(Usuario, cliente["id"]).estado == EstadoUsuario.INACTIVO

    login = client.post("/api/usuarios/login", json={"email": cliente["email"], "password": "secreto1"})
    assert login.status_code == 401


def test_delete_user_without_dependents_is_hard(client: TestClient, store, tecnico):
    assert client.delete(f"/api/usuarios/{tecnico['id']}").status_code == 204
    assert store.get(Usuario, tecnico["id"]) is None


def test_hashed_passwords_when_enabled(client: TestClient, store, monkeypatch):
    monkeypatch.setattr(security.settings, "hash_passwords", True)
    created = client.post("/api/usuarios", json=usuario_payload("606660666", "hash@revtec.cr")).json()
    assert store.get(Usuario, created["id"]).password.startswith("$2b$")

    login = client.post("/api/usuarios/login", json={"email": "hash@revtec.cr", "password": "secreto1"})
    assert login.status_code == 200


def test_verify_password_accepts_plain_and_bcrypt():
    hashed = security.get_password_hash("secreto1")
    assert security.verify_password("secreto1", hashed)
    assert security.verify_password("secreto1", "secreto1")
    assert not security.verify_password("secreto1", None)
    assert not security.verify_password("otra", hashed)
