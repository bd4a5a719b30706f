# chatgen/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from chatgen.core.json import error_response

log = logging.getLogger("uvicorn")


class AppError(Exception):
    """
    Error de dominio con status HTTP y mensaje apto para el cliente.
    El detalle interno (SQL, respuesta upstream...) va al log, nunca al JSON.
    """
    status_code = 500
    default_message = "server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "invalid input"


class AuthError(AppError):
    status_code = 401
    default_message = "invalid credentials"


class ConflictError(AppError):
    status_code = 409
    default_message = "email already registered"


class StoreError(AppError):
    status_code = 500
    default_message = "server error"


class UpstreamError(AppError):
    status_code = 502
    default_message = "upstream service failed"


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        log.error(f"❌ {request.method} {request.url.path}: {type(exc).__name__}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # campos desconocidos, tipos malos o body que no es JSON
    log.info(f"⚠️ body inválido en {request.url.path}: {exc.errors()!r}")
    return error_response(400, "invalid request body")


async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception(f"💥 UNHANDLED ERROR en {request.method} {request.url.path}", exc_info=exc)
    return error_response(500, "internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
