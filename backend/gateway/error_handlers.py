# backend/gateway/error_handlers.py
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from database.errors import DatabaseConnectionError
from queries.sql_template import UnknownColumnError

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, int, float, bool, type(None))


def server_error(message: str, exc: BaseException) -> HTTPException:
    """500 carrying the route's message; the error text is dropped in production."""
    return HTTPException(status_code=500, detail={"message": message, "error": str(exc)})


def _respond(status_code: int, body: Dict[str, Any], headers=None) -> JSONResponse:
    body = {"success": False, **body}
    if settings.is_production:
        body.pop("error", None)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


def _validation_errors(exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "form")]
        message = str(err.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        entry = {"field": ".".join(loc), "message": message}
        value = err.get("input")
        if isinstance(value, _PRIMITIVES):
            entry["value"] = value
        errors.append(entry)
    return errors


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict):
            body = dict(exc.detail)
            body.setdefault("message", "Request failed")
        elif exc.status_code == 404 and exc.detail == "Not Found":
            body = {"message": "Route not found"}
        else:
            body = {"message": str(exc.detail)}
        return _respond(exc.status_code, body, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _respond(400, {"message": "Validation failed", "errors": _validation_errors(exc)})

    @app.exception_handler(UnknownColumnError)
    async def unknown_column_handler(request: Request, exc: UnknownColumnError):
        return _respond(400, {"message": str(exc), "fields": exc.columns})

    @app.exception_handler(DatabaseConnectionError)
    async def database_connection_handler(request: Request, exc: DatabaseConnectionError):
        return _respond(500, {"message": "Database connection failed", "error": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _respond(500, {"message": "Internal server error", "error": str(exc)})
