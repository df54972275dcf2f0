from datetime import datetime, time, timedelta

import pytest

from app.core.errors import ConflictError, MalformedError, NotFoundError, PreconditionFailedError
from app.models import (
    Certificado,
    Cita,
    EstadoCertificado,
    EstadoCita,
    Inspeccion,
    ResultadoInspeccion,
    TipoUsuario,
    Usuario,
)
from app.services import rules
from app.services.rules import Borrado


def test_parse_hora_accepts_with_and_without_seconds():
    assert rules.parse_hora("08:30:00") == time(8, 30)
    assert rules.parse_hora(" 14:05 ") == time(14, 5)


@pytest.mark.parametrize("valor", ["", "9am", "25:00:00", "08-30-00"])
def test_parse_hora_rejects_malformed(valor):
    with pytest.raises(MalformedError) as exc:
        rules.parse_hora(valor)
    assert exc.value.tipo == "malformed"


def test_require_raises_not_found():
    with pytest.raises(NotFoundError):
        rules.require(None, "Cita no encontrada")
    assert rules.require(5, "no") == 5


def test_horario_ocupado_is_conflict():
    rules.validar_horario_libre(None)
    with pytest.raises(ConflictError):
        rules.validar_horario_libre(Cita(estado=EstadoCita.PROGRAMADA))


def test_terminal_states_cannot_be_left():
    rules.validar_cambio_estado_cita(EstadoCita.PROGRAMADA, EstadoCita.CANCELADA)
    rules.validar_cambio_estado_cita(EstadoCita.PROGRAMADA, EstadoCita.COMPLETADA)
    rules.validar_cambio_estado_cita(EstadoCita.CANCELADA, EstadoCita.CANCELADA)
    with pytest.raises(PreconditionFailedError):
        rules.validar_cambio_estado_cita(EstadoCita.CANCELADA, EstadoCita.PROGRAMADA)
    with pytest.raises(PreconditionFailedError):
        rules.validar_cambio_estado_cita(EstadoCita.COMPLETADA, EstadoCita.CANCELADA)


def test_only_programada_can_be_inspected():
    rules.validar_cita_inspeccionable(Cita(estado=EstadoCita.PROGRAMADA))
    for estado in (EstadoCita.CANCELADA, EstadoCita.COMPLETADA):
        with pytest.raises(PreconditionFailedError):
            rules.validar_cita_inspeccionable(Cita(estado=estado))


def test_tecnico_role_required():
    rules.validar_tecnico(Usuario(tipo_usuario=TipoUsuario.TECNICO))
    with pytest.raises(PreconditionFailedError):
        rules.validar_tecnico(Usuario(tipo_usuario=TipoUsuario.CLIENTE))


def test_certificate_requires_approved_inspection():
    rules.validar_inspeccion_aprobada(Inspeccion(resultado=ResultadoInspeccion.APROBADO))
    with pytest.raises(PreconditionFailedError):
        rules.validar_inspeccion_aprobada(Inspeccion(resultado=ResultadoInspeccion.RECHAZADO))


def test_void_twice_is_precondition_failed():
    rules.validar_certificado_anulable(Certificado(estado=EstadoCertificado.VALIDO))
    with pytest.raises(PreconditionFailedError):
        rules.validar_certificado_anulable(Certificado(estado=EstadoCertificado.ANULADO))


def test_esta_vigente_boundary_is_strict():
    ahora = datetime(2025, 3, 1, 12, 0, 0)
    vence_ahora = Certificado(estado=EstadoCertificado.VALIDO, fecha_vencimiento=ahora)
    vence_luego = Certificado(estado=EstadoCertificado.VALIDO, fecha_vencimiento=ahora + timedelta(seconds=1))
    anulado = Certificado(estado=EstadoCertificado.ANULADO, fecha_vencimiento=ahora + timedelta(days=30))
    assert rules.esta_vigente(vence_ahora, ahora) is False
    assert rules.esta_vigente(vence_luego, ahora) is True
    assert rules.esta_vigente(anulado, ahora) is False


def test_vencido_is_never_vigente():
    ahora = datetime(2025, 3, 1)
    cert = Certificado(estado=EstadoCertificado.VENCIDO, fecha_vencimiento=ahora + timedelta(days=1))
    assert rules.esta_vigente(cert, ahora) is False


def test_deletion_policy():
    assert rules.resolver_borrado("usuario", False) is Borrado.FISICO
    assert rules.resolver_borrado("usuario", True) is Borrado.LOGICO
    assert rules.resolver_borrado("cita", True) is Borrado.LOGICO
    assert rules.resolver_borrado("vehiculo", False) is Borrado.FISICO
    for entidad in ("vehiculo", "estacion", "inspeccion"):
        with pytest.raises(ConflictError):
            rules.resolver_borrado(entidad, True)
