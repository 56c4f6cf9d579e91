"""Middlewares personalizados para la API de assets."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from asset_api.core.logging import get_logger

logger = get_logger("asset_api.request")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-Client",
    "Access-Control-Expose-Headers": "X-Data-Source, X-Node-Source, X-Request-Id",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Agrega cabeceras CORS fijas a toda respuesta y contesta OPTIONS con 204.

    A diferencia de `CORSMiddleware`, las cabeceras se envían aunque la
    petición no incluya `Origin`.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Registra información básica de cada request entrante."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        level: int = logging.INFO,
        skip_prefixes: Iterable[str] = (),
    ) -> None:
        super().__init__(app)
        self.level = level
        self.skip_prefixes = tuple(skip_prefixes)

    async def dispatch(self, request: Request, call_next):
        request_id = uuid4().hex
        path = request.url.path
        if path.startswith(self.skip_prefixes):
            response = await call_next(request)
            response.headers["x-request-id"] = request_id
            return response

        start = time.perf_counter()
        client_ip = request.headers.get("x-forwarded-for")
        if client_ip:
            client_ip = client_ip.split(",")[0].strip()
        elif request.client:
            client_ip = request.client.host

        logger.log(
            self.level,
            "request.started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "client_ip": client_ip,
                "x_client": request.headers.get("x-client"),
            },
        )

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "request.failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": path,
                    "duration_ms": round(duration_ms, 2),
                    "client_ip": client_ip,
                },
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["x-request-id"] = request_id

        # Los errores del servidor siempre se registran, aun con nivel alto configurado.
        level = logging.ERROR if response.status_code >= 500 else self.level
        logger.log(
            level,
            "request.completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
