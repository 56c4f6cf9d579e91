"""Rutas de lectura para assets `data` (CSV) y `nodes` (JSON)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from asset_api.api import schemas
from asset_api.api.deps import get_client_id, get_resolver
from asset_api.services.assets import AssetResolver, ResourceClass

_ERRORS = {
    400: {"model": schemas.ErrorResponse},
    404: {"model": schemas.ErrorResponse},
}

router = APIRouter(tags=["assets"])


@router.get(
    "/data",
    response_model=schemas.DataListing,
    responses={400: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
    summary="Lista los CSV disponibles",
)
def list_data(
    client_id: str | None = Depends(get_client_id),
    resolver: AssetResolver = Depends(get_resolver),
) -> schemas.DataListing:
    client = resolver.resolve_client(client_id)
    entries = resolver.list_assets(ResourceClass.DATA, client)
    return schemas.DataListing(client=client, files=[entry.filename for entry in entries])


@router.get(
    "/data/{filename}",
    response_class=Response,
    responses=_ERRORS,
    summary="Descarga un CSV con fallback al genérico",
)
def get_data_file(
    filename: str,
    client_id: str | None = Depends(get_client_id),
    resolver: AssetResolver = Depends(get_resolver),
) -> Response:
    """Devuelve el CSV; `X-Data-Source` indica qué directorio lo proveyó."""
    asset = resolver.fetch_asset(ResourceClass.DATA, client_id, filename)
    spec = resolver.spec_for(ResourceClass.DATA)
    return Response(
        content=asset.content,
        media_type=spec.media_type,
        headers={spec.source_header: asset.source},
    )


@router.get(
    "/nodes",
    response_model=schemas.NodeListing,
    responses={400: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
    summary="Lista las definiciones de nodos con su procedencia",
)
def list_nodes(
    client_id: str | None = Depends(get_client_id),
    resolver: AssetResolver = Depends(get_resolver),
) -> schemas.NodeListing:
    client = resolver.resolve_client(client_id)
    entries = resolver.list_assets(ResourceClass.NODES, client)
    return schemas.NodeListing(
        client=client,
        files=[schemas.NodeFile(filename=entry.filename, source=entry.provenance) for entry in entries],
    )


@router.get(
    "/nodes/{filename}",
    responses=_ERRORS,
    summary="Devuelve un nodo JSON con fallback al genérico",
)
def get_node_file(
    filename: str,
    client_id: str | None = Depends(get_client_id),
    resolver: AssetResolver = Depends(get_resolver),
) -> JSONResponse:
    """Devuelve el JSON ya parseado; `X-Node-Source` indica su procedencia."""
    asset = resolver.fetch_asset(ResourceClass.NODES, client_id, filename)
    spec = resolver.spec_for(ResourceClass.NODES)
    return JSONResponse(content=asset.data, headers={spec.source_header: asset.source})
