"""Translate exceptions into the error payload {title, statusCode, details}."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse, validation_details
from src.core.exceptions import PersistenceError, ServiceError

logger = logging.getLogger(__name__)


def error_response(title: str, status_code: int, details: list[str]) -> JSONResponse:
    body = ErrorResponse(title=title, status_code=status_code, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
        return error_response(exc.title, exc.status_code, exc.details)

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.warning("%s %s failed in storage: %s", request.method, request.url.path, exc)
        return error_response("Bad Request", 400, [str(exc)])

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response("Validation Error", 400, validation_details(exc.errors()))
