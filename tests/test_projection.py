from datetime import datetime, timedelta

from app.models import Certificado, Estacion, EstadoCertificado, Usuario, Vehiculo
from app.services.projection import (
    SIN_DATO,
    certificado_a_respuesta,
    estacion_info,
    persona_info,
    vehiculo_info,
)


def test_vehiculo_info():
    vehiculo = Vehiculo(placa="ABC123", marca="Toyota", modelo="Corolla")
    assert vehiculo_info(vehiculo) == "ABC123 - Toyota Corolla"
    assert vehiculo_info(None) == SIN_DATO


def test_persona_info():
    assert persona_info(Usuario(nombre="Carlos", apellidos="Rojas Vega")) == "Carlos Rojas Vega"
    assert persona_info(None) == "N/A"


def test_estacion_info_falls_back():
    assert estacion_info(Estacion(nombre="RTV Cartago")) == "RTV Cartago"
    assert estacion_info(Estacion(nombre="")) == SIN_DATO
    assert estacion_info(None) == SIN_DATO


def test_certificado_response_computes_vigencia():
    ahora = datetime(2025, 1, 1)
    cert = Certificado(
        id=1,
        inspeccion_id=2,
        numero_certificado="C-1",
        fecha_emision=ahora,
        fecha_vencimiento=ahora + timedelta(days=1),
        estado=EstadoCertificado.VALIDO,
    )
    assert certificado_a_respuesta(cert, ahora).esta_vigente is True
    assert certificado_a_respuesta(cert, ahora + timedelta(days=2)).esta_vigente is False
