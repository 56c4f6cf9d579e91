"""Traducción de errores a respuestas JSON `{error}`."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from asset_api.core.logging import get_logger
from asset_api.core.middleware import CORS_HEADERS
from asset_api.services.assets import AssetError

logger = get_logger("asset_api.errors")


async def asset_error_handler(request: Request, exc: AssetError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Respuesta 500 `{error}`; corre fuera de los middlewares, así que agrega CORS."""
    logger.exception(
        "request.unhandled_error",
        extra={"method": request.method, "path": request.url.path, "error": str(exc)},
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=CORS_HEADERS,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers de error de la API."""
    app.add_exception_handler(AssetError, asset_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
