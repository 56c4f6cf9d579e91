"""Dependencias comunes para las rutas de assets."""

from fastapi import Header, Query, Request

from asset_api.services.assets import AssetResolver


def get_resolver(request: Request) -> AssetResolver:
    """Devuelve el resolver creado junto con la aplicación."""
    return request.app.state.resolver


async def get_client_id(
    x_client: str | None = Header(default=None),
    client: str | None = Query(default=None, description="Alternativa a la cabecera X-Client."),
) -> str | None:
    """Toma el cliente de `X-Client`; el query param sólo aplica si falta la cabecera."""
    return x_client or client
