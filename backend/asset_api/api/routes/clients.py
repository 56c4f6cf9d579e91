"""Catálogo de clientes habilitados."""

from fastapi import APIRouter, Request

from asset_api.api.schemas import ClientCatalog

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=ClientCatalog, summary="Clientes permitidos")
def list_clients(request: Request) -> ClientCatalog:
    """Expone la lista configurada para poblar selectores en el frontend."""
    settings = request.app.state.settings
    return ClientCatalog(default=settings.default_client, clients=settings.clients)
