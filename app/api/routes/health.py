from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import get_store
from app.core.logging import get_logger
from app.models import Estacion, EstadoCita, TipoUsuario, Vehiculo
from app.services.store import Store

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/health/db")
def health_db(store: Store = Depends(get_store)):
    try:
        store.db.execute(text("SELECT 1"))
        return {
            "status": "ok",
            "usuarios": {
                "total": store.contar_usuarios(),
                "activos": store.contar_usuarios(solo_activos=True),
                "tecnicos": store.contar_usuarios(tipo=TipoUsuario.TECNICO),
                "clientes": store.contar_usuarios(tipo=TipoUsuario.CLIENTE),
            },
            "estaciones": store.count(Estacion),
            "vehiculos": store.count(Vehiculo),
            "citas": {
                "total": store.contar_citas(),
                "programadas": store.contar_citas(estado=EstadoCita.PROGRAMADA),
            },
        }
    except SQLAlchemyError as exc:
        logger.error("health_db_error", error=str(exc))
        return {"status": "error", "detail": "No se pudo conectar a la base de datos"}
