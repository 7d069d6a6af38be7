"""
Exception handlers.

Every error leaving the API has the body {"message": "..."}:
- HTTPException            -> its own status code and detail
- RequestValidationError   -> 400 with a readable summary of the violations
- anything else            -> 500 with a generic message (logged, never echoed)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def format_validation_errors(errors) -> str:
    """
    Turn pydantic error dicts into one line, e.g.
    'Validation error: Field required at "username"; String should have at least 1 character at "password"'
    """
    parts = []
    for err in errors:
        # Drop the leading "body"/"path"/"query" segment
        loc = [str(p) for p in err.get("loc", ())[1:]]
        msg = err.get("msg", "Invalid value")
        if loc:
            parts.append(f'{msg} at "{".".join(loc)}"')
        else:
            parts.append(msg)
    return "Validation error: " + "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": format_validation_errors(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
