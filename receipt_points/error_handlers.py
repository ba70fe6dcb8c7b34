# receipt_points/error_handlers.py
# decode failures are client errors (400); the core never sees them

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .utils.logging import logger


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected payload on %s %s: %d error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={
            "error": "Failed to decode receipt",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )
