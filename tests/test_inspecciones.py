from datetime import datetime

from fastapi.testclient import TestClient

from conftest import FECHA_CITA, vence_en

CHECKLIST = [
    {"categoria_revision": "Frenos", "resultado_item": "OK"},
    {"categoria_revision": "Luces", "resultado_item": "FALLO", "observaciones_item": "Stop izquierdo"},
]


def inspeccion_payload(cita_id: int, tecnico_id: int, **extra) -> dict:
    payload = {
        "cita_id": cita_id,
        "tecnico_id": tecnico_id,
        "fecha_inspeccion": datetime.utcnow().isoformat(),
        "resultado": "aprobado",
    }
    payload.update(extra)
    return payload


def test_register_inspection_with_checklist(client: TestClient, nueva_cita, tecnico):
    cita = nueva_cita()
    response = client.post(
        "/api/inspecciones",
        json=inspeccion_payload(cita["id"], tecnico["id"], detalles=CHECKLIST, fecha_vencimiento=vence_en(365)),
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["tecnico_info"] == "Carlos Rojas"
    assert body["vehiculo_info"] == "SJB123 - Toyota Corolla"

    detalles = client.get(f"/api/detalles-inspeccion/por-inspeccion/{body['id']}").json()
    assert [d["categoria_revision"] for d in detalles] == ["Frenos", "Luces"]
    assert detalles[1]["resultado_item"] == "FALLO"


def test_inspection_leaves_cita_programada(client: TestClient, nueva_inspeccion):
    inspeccion = nueva_inspeccion()
    cita = client.get(f"/api/citas/{inspeccion['cita_id']}").json()
    assert cita["estado"] == "programada"


def test_second_inspection_for_cita_is_conflict(client: TestClient, nueva_inspeccion, tecnico):
    inspeccion = nueva_inspeccion()
    response = client.post("/api/inspecciones", json=inspeccion_payload(inspeccion["cita_id"], tecnico["id"]))
    assert response.status_code == 409
    assert response.json()["tipo"] == "conflict"


def test_cancelled_cita_cannot_be_inspected(client: TestClient, nueva_cita, tecnico):
    cita = nueva_cita(hora="10:00:00")
    client.put(
        f"/api/citas/{cita['id']}",
        json={"fecha_cita": FECHA_CITA, "hora_cita": "10:00:00", "estado": "cancelada"},
    )
    response = client.post("/api/inspecciones", json=inspeccion_payload(cita["id"], tecnico["id"]))
    assert response.status_code == 400
    assert response.json()["tipo"] == "precondition_failed"


def test_existing_inspection_reported_before_cita_state(client: TestClient, nueva_inspeccion, tecnico):
    inspeccion = nueva_inspeccion(hora="11:00:00")
    client.put(
        f"/api/citas/{inspeccion['cita_id']}",
        json={"fecha_cita": FECHA_CITA, "hora_cita": "11:00:00", "estado": "cancelada"},
    )
    response = client.post("/api/inspecciones", json=inspeccion_payload(inspeccion["cita_id"], tecnico["id"]))
    assert response.status_code == 409


def test_missing_cita_reported_before_role(client: TestClient, cliente):
    response = client.post("/api/inspecciones", json=inspeccion_payload(999, cliente["id"]))
    assert response.status_code == 404
    assert response.json()["detail"] == "La cita especificada no existe"


def test_inspector_must_be_tecnico(client: TestClient, nueva_cita, cliente):
    cita = nueva_cita()
    response = client.post("/api/inspecciones", json=inspeccion_payload(cita["id"], cliente["id"]))
    assert response.status_code == 400
    assert response.json()["detail"] == "El usuario indicado no es técnico"


def test_update_inspection(client: TestClient, nueva_inspeccion):
    inspeccion = nueva_inspeccion()
    response = client.put(
        f"/api/inspecciones/{inspeccion['id']}",
        json={"resultado": "rechazado", "observaciones_tecnicas": "Emisiones fuera de rango"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["resultado"] == "rechazado"
    assert body["observaciones_tecnicas"] == "Emisiones fuera de rango"


def test_delete_inspection_removes_checklist(client: TestClient, nueva_inspeccion):
    inspeccion = nueva_inspeccion(detalles=CHECKLIST)
    assert client.delete(f"/api/inspecciones/{inspeccion['id']}").status_code == 204
    assert client.get(f"/api/inspecciones/{inspeccion['id']}").status_code == 404
    assert client.get("/api/detalles-inspeccion").json() == []


def test_delete_inspection_with_certificate_is_conflict(client: TestClient, nueva_inspeccion):
    inspeccion = nueva_inspeccion()
    client.post(
        "/api/certificados",
        json={"inspeccion_id": inspeccion["id"], "numero_certificado": "RTV-0001", "fecha_vencimiento": vence_en(365)},
    )
    response = client.delete(f"/api/inspecciones/{inspeccion['id']}")
    assert response.status_code == 409


def test_detalle_crud(client: TestClient, nueva_inspeccion):
    inspeccion = nueva_inspeccion()
    missing = client.post(
        "/api/detalles-inspeccion",
        json={"inspeccion_id": 999, "categoria_revision": "Llantas", "resultado_item": "OK"},
    )
    assert missing.status_code == 404

    created = client.post(
        "/api/detalles-inspeccion",
        json={"inspeccion_id": inspeccion["id"], "categoria_revision": "Llantas", "resultado_item": "OK"},
    )
    assert created.status_code == 201
    detalle_id = created.json()["id"]

    updated = client.put(
        f"/api/detalles-inspeccion/{detalle_id}",
        json={"categoria_revision": "Llantas", "resultado_item": "FALLO", "observaciones_item": "Desgaste"},
    )
    assert updated.status_code == 200
    assert updated.json()["resultado_item"] == "FALLO"

    assert client.delete(f"/api/detalles-inspeccion/{detalle_id}").status_code == 204
    assert client.get(f"/api/detalles-inspeccion/{detalle_id}").status_code == 404


def test_invalid_item_result_is_rejected(client: TestClient, nueva_inspeccion):
    inspeccion = nueva_inspeccion()
    response = client.post(
        "/api/detalles-inspeccion",
        json={"inspeccion_id": inspeccion["id"], "categoria_revision": "Llantas", "resultado_item": "REGULAR"},
    )
    assert response.status_code == 422


def test_cancelled_cita_rejected_before_inspector_role(client: TestClient, nueva_cita, cliente):
    cita = nueva_cita(hora="12:00:00")
    client.put(
        f"/api/citas/{cita['id']}",
        json={"fecha_cita": FECHA_CITA, "hora_cita": "12:00:00", "estado": "cancelada"},
    )
    response = client.post("/api/inspecciones", json=inspeccion_payload(cita["id"], cliente["id"]))
    assert response.status_code == 400
    assert response.json()["detail"] == "Solo se pueden inspeccionar citas en estado programada"

    missing = client.post("/api/inspecciones", json=inspeccion_payload(cita["id"], 999))
    assert missing.status_code == 404
    assert client.get("/api/inspecciones").json() == []
