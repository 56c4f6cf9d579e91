"""Punto de entrada principal para la aplicación FastAPI."""

import logging
from pathlib import Path

from fastapi import FastAPI

from asset_api.api.routes.assets import router as assets_router
from asset_api.api.routes.clients import router as clients_router
from asset_api.api.routes.health import router as health_router
from asset_api.core.config import Settings, settings as default_settings
from asset_api.core.errors import register_exception_handlers
from asset_api.core.logging import configure_logging, get_logger, resolve_log_level
from asset_api.core.middleware import CORSHeadersMiddleware, RequestLoggingMiddleware
from asset_api.services.assets import AssetResolver, default_specs


def create_app(settings: Settings | None = None) -> FastAPI:
    """Crea y configura la instancia de FastAPI."""
    settings = settings or default_settings
    default_log_level = logging.DEBUG if settings.environment != "production" else logging.INFO
    log_level = resolve_log_level(settings.log_level, default=default_log_level)
    per_logger_files = None
    if settings.log_file_path:
        log_dir = Path(settings.log_file_path).parent
        per_logger_files = {"asset_api.request": str(log_dir / "request.log")}

    configure_logging(
        level=log_level,
        log_file=settings.log_file_path,
        per_logger_files=per_logger_files,
    )

    app = FastAPI(title="Asset API", version="0.1.0")
    app.state.settings = settings
    app.state.resolver = AssetResolver(
        settings.assets_root,
        settings.valid_clients,
        default_client=settings.default_client,
        specs=default_specs(data_dir=settings.data_dir, nodes_dir=settings.nodes_dir),
    )

    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(
        RequestLoggingMiddleware,
        level=resolve_log_level(settings.request_log_level),
        skip_prefixes=settings.request_log_skip_prefixes,
    )
    register_exception_handlers(app)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(clients_router, prefix=settings.api_prefix)
    app.include_router(assets_router, prefix=settings.api_prefix)

    log = get_logger("asset_api")
    root = Path(settings.assets_root)
    if root.is_dir():
        log.info("assets.root_ready", extra={"path": str(root.resolve())})
    else:
        log.warning("assets.root_missing", extra={"expected_path": str(root)})

    return app


app = create_app()
