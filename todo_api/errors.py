"""Exception handlers shaping error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def not_found_or_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    """Render 404s with an empty body, everything else the FastAPI way."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body validation failures as 400 Bad Request."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to the application."""
    app.add_exception_handler(StarletteHTTPException, not_found_or_http_error)
    app.add_exception_handler(RequestValidationError, validation_error)
