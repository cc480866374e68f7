import logging

from botocore.exceptions import ClientError
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from helpers.errors import AppError, StorageFailure

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message}
    )


def _first_error(errors) -> str:
    if not errors:
        return "Invalid request"
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else error.get("msg", "Invalid request")


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(400, _first_error(exc.errors()))


async def model_validation_handler(request: Request, exc: ValidationError):
    return error_response(400, _first_error(exc.errors()))


async def storage_error_handler(request: Request, exc: ClientError):
    code = exc.response.get("Error", {}).get("Code", "Unknown")
    logger.error(f"DynamoDB error on {request.method} {request.url.path}: {str(exc)}")
    return await app_error_handler(request, StorageFailure(f"Database error: {code}"))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, str(exc))


def register_error_handlers(app: FastAPI):
    """Render every failure as {"success": false, "message": ...}"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, model_validation_handler)
    app.add_exception_handler(ClientError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
