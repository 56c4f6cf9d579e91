"""Esquemas de respuesta de la API de assets."""

from __future__ import annotations

from pydantic import BaseModel, Field

from asset_api.core.config import ClientOption


class ErrorResponse(BaseModel):
    """Cuerpo de cualquier respuesta de error."""

    error: str


class DataListing(BaseModel):
    """Respuesta de GET /data."""

    client: str
    files: list[str] = Field(default_factory=list)


class NodeFile(BaseModel):
    """Archivo de nodos junto con el directorio que lo provee."""

    filename: str
    source: str = Field(..., description="Identificador del cliente o `generic`.")


class NodeListing(BaseModel):
    """Respuesta de GET /nodes."""

    client: str
    files: list[NodeFile] = Field(default_factory=list)


class ClientCatalog(BaseModel):
    """Respuesta de GET /clients."""

    default: str
    clients: list[ClientOption]
