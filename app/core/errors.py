"""Rechazos tipados de los casos de uso.

Cada error lleva un mensaje legible (`detail`) y una clasificación (`tipo`)
que el manejador de la aplicación devuelve tal cual al cliente.
"""

from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    tipo = "internal"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def as_dict(self) -> dict[str, str]:
        return {"detail": self.detail, "tipo": self.tipo}


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    tipo = "not_found"


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    tipo = "conflict"


class PreconditionFailedError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    tipo = "precondition_failed"


class MalformedError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    tipo = "malformed"


class InternalError(ServiceError):
    pass
