"""
Exception handlers mapping failures to ``{"message": ...}`` responses.

Details stay in the server log; clients only see the message.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from auth.errors import AuthError

logger = logging.getLogger(__name__)

_INTERNAL_ERROR = "Erro interno do servidor"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthError)
    async def handle_auth_error(_: Request, exc: AuthError):
        return _message(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body for %s: %s", request.url.path, exc.errors())
        return _message(status.HTTP_400_BAD_REQUEST, "Corpo da requisição inválido")

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Storage error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, _INTERNAL_ERROR)
