# app/api/responses.py
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.params import InvalidParam
from app.domain.schemas import ErrorOut
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
INVALID_PAYLOAD = "Invalid request payload"
INTERNAL_ERROR = "Internal server error"


def respond_with_json(status_code: int, payload: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def respond_with_error(status_code: int, message: str) -> JSONResponse:
    return respond_with_json(status_code, ErrorOut(error=message))


async def invalid_param_handler(request: Request, exc: InvalidParam) -> JSONResponse:
    return respond_with_error(400, str(exc))


async def invalid_payload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: invalid payload {exc.errors()}")
    return respond_with_error(400, INVALID_PAYLOAD)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    #szczegoly tylko w logu, klient dostaje ogolny komunikat
    logger.exception(f"{request.method} {request.url.path}: database error")
    return respond_with_error(500, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidParam, invalid_param_handler)
    app.add_exception_handler(RequestValidationError, invalid_payload_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
