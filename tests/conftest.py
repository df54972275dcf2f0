import os
from datetime import date, datetime, timedelta
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("CREATE_TABLES", "false")
os.environ.setdefault("HASH_PASSWORDS", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.main import app  # noqa: E402
from app.db.session import SessionLocal, engine, get_db  # noqa: E402
from app.models import Base  # noqa: E402
from app.services.store import Store  # noqa: E402

FECHA_CITA = str(date.today() + timedelta(days=7))


@pytest.fixture(autouse=True)
def prepare_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


def override_get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def store() -> Generator[Store, None, None]:
    db = SessionLocal()
    try:
        yield Store(db)
    finally:
        db.close()


def usuario_payload(cedula: str, email: str, tipo: str = "cliente", **extra) -> dict:
    payload = {
        "nombre": "Ana",
        "apellidos": "Mora Solís",
        "cedula": cedula,
        "email": email,
        "telefono": "8888-0000",
        "tipo_usuario": tipo,
        "password": "secreto1",
    }
    payload.update(extra)
    return payload


def estacion_payload(nombre: str = "RTV Heredia") -> dict:
    return {
        "nombre": nombre,
        "direccion": "Zona Franca, 200 m norte",
        "provincia": "Heredia",
        "canton": "Heredia",
        "distrito": "Ulloa",
        "horario_atencion": "L-V 7:00-17:00",
    }


@pytest.fixture()
def cliente(client: TestClient) -> dict:
    response = client.post("/api/usuarios", json=usuario_payload("101110111", "ana@revtec.cr"))
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def tecnico(client: TestClient) -> dict:
    payload = usuario_payload("202220222", "carlos@revtec.cr", tipo="tecnico", nombre="Carlos", apellidos="Rojas")
    response = client.post("/api/usuarios", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def estacion(client: TestClient) -> dict:
    response = client.post("/api/estaciones", json=estacion_payload())
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def vehiculo(client: TestClient, cliente: dict) -> dict:
    payload = {
        "placa": "SJB123",
        "propietario_id": cliente["id"],
        "marca": "Toyota",
        "modelo": "Corolla",
        "anio": 2018,
    }
    response = client.post("/api/vehiculos", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def nueva_cita(client: TestClient, vehiculo: dict, estacion: dict) -> Callable[..., dict]:
    def _crear(hora: str = "09:00:00", fecha: str = FECHA_CITA, **extra) -> dict:
        payload = {
            "vehiculo_id": vehiculo["id"],
            "estacion_id": estacion["id"],
            "fecha_cita": fecha,
            "hora_cita": hora,
        }
        payload.update(extra)
        response = client.post("/api/citas", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _crear


@pytest.fixture()
def nueva_inspeccion(client: TestClient, nueva_cita, tecnico: dict) -> Callable[..., dict]:
    def _crear(hora: str = "09:00:00", resultado: str = "aprobado", **extra) -> dict:
        cita = nueva_cita(hora=hora)
        payload = {
            "cita_id": cita["id"],
            "tecnico_id": tecnico["id"],
            "fecha_inspeccion": datetime.utcnow().isoformat(),
            "resultado": resultado,
        }
        payload.update(extra)
        response = client.post("/api/inspecciones", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _crear


def vence_en(dias: int) -> str:
    return (datetime.utcnow() + timedelta(days=dias)).isoformat()
