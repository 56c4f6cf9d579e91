"""Resolución de assets CSV/JSON con override por cliente.

Cada clase de recurso vive en un directorio bajo la raíz configurada. Un
archivo en `<clase>/<cliente>/<archivo>` sustituye por completo al genérico
`<clase>/<archivo>`; no hay mezcla de contenidos.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from asset_api.core.logging import get_logger, log_event

logger = get_logger("asset_api.assets")

GENERIC = "generic"


class ResourceClass(str, Enum):
    """Categorías de assets servidas por la API."""

    DATA = "data"
    NODES = "nodes"


@dataclass(frozen=True, slots=True)
class ResourceSpec:
    """Reglas de una clase de recurso: directorio, sufijo y formato."""

    directory: str
    suffix: str
    media_type: str
    source_header: str
    parse_json: bool = False
    hidden_prefix: str | None = None


@dataclass(frozen=True, slots=True)
class AssetEntry:
    """Elemento de un listado: nombre de archivo y quién lo provee."""

    filename: str
    provenance: str


@dataclass(frozen=True, slots=True)
class Asset:
    """Asset resuelto junto con su procedencia."""

    filename: str
    provenance: str
    content: bytes
    data: Any = None

    @property
    def source(self) -> str:
        """Valor para la cabecera de procedencia, ej. `ferrero/a.csv`."""
        return f"{self.provenance}/{self.filename}"


class AssetError(Exception):
    """Error base; `status_code` es el código HTTP con el que se expone."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidClient(AssetError):
    status_code = 400


class InvalidFilename(AssetError):
    status_code = 400


class AssetNotFound(AssetError):
    status_code = 404


class InvalidContent(AssetNotFound):
    """El archivo existe pero su contenido no es JSON válido."""


class ListingError(AssetError):
    """No fue posible enumerar el directorio genérico."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def default_specs(*, data_dir: str = "data", nodes_dir: str = "nodes") -> dict[ResourceClass, ResourceSpec]:
    """Construye las reglas estándar para `data` (CSV) y `nodes` (JSON)."""
    return {
        ResourceClass.DATA: ResourceSpec(
            directory=data_dir,
            suffix=".csv",
            media_type="text/csv",
            source_header="X-Data-Source",
        ),
        ResourceClass.NODES: ResourceSpec(
            directory=nodes_dir,
            suffix=".json",
            media_type="application/json",
            source_header="X-Node-Source",
            parse_json=True,
            hidden_prefix="_",
        ),
    }


class AssetResolver:
    """Resuelve listados y lecturas de assets con fallback cliente → genérico.

    Args:
        root: Directorio raíz de los assets.
        valid_clients: Identificadores de cliente permitidos.
        default_client: Cliente usado cuando la petición no indica ninguno.
        specs: Reglas por clase de recurso; por defecto `default_specs()`.
    """

    def __init__(
        self,
        root: Path | str,
        valid_clients: Iterable[str],
        *,
        default_client: str,
        specs: dict[ResourceClass, ResourceSpec] | None = None,
    ) -> None:
        self.root = Path(root)
        self.valid_clients = frozenset(valid_clients)
        if default_client not in self.valid_clients:
            raise ValueError(f"Default client '{default_client}' is not in the allow-list")
        self.default_client = default_client
        self.specs = specs or default_specs()

    def spec_for(self, resource_class: ResourceClass) -> ResourceSpec:
        return self.specs[resource_class]

    def resolve_client(self, client_id: str | None) -> str:
        """Aplica el cliente por defecto y valida contra la lista permitida."""
        candidate = client_id or self.default_client
        if candidate not in self.valid_clients:
            raise InvalidClient("Invalid client")
        return candidate

    def list_assets(self, resource_class: ResourceClass, client_id: str | None) -> list[AssetEntry]:
        """Lista los archivos genéricos marcando los que el cliente sobreescribe."""
        client = self.resolve_client(client_id)
        spec = self.spec_for(resource_class)
        generic_dir = self.root / spec.directory

        try:
            generic_files = self._matching_files(generic_dir, spec)
        except OSError as exc:
            log_event(
                logger,
                "assets.listing_failed",
                level=logging.ERROR,
                resource_class=resource_class.value,
                directory=str(generic_dir),
                error=str(exc),
            )
            raise ListingError("Failed to read directory") from exc

        try:
            overrides = set(self._matching_files(generic_dir / client, spec, include_hidden=True))
        except OSError:
            # Sin directorio del cliente todo proviene del genérico.
            overrides = set()

        return [
            AssetEntry(filename=name, provenance=client if name in overrides else GENERIC)
            for name in sorted(generic_files)
        ]

    def fetch_asset(
        self, resource_class: ResourceClass, client_id: str | None, filename: str
    ) -> Asset:
        """Lee un asset priorizando la copia del cliente sobre la genérica."""
        client = self.resolve_client(client_id)
        spec = self.spec_for(resource_class)
        if not filename.endswith(spec.suffix):
            raise InvalidFilename(f"Only {spec.suffix.lstrip('.').upper()} files are allowed")

        base_dir = self.root / spec.directory
        client_path = base_dir / client / filename
        generic_path = base_dir / filename

        try:
            content = client_path.read_bytes()
            provenance = client
        except OSError:
            try:
                content = generic_path.read_bytes()
            except OSError as exc:
                log_event(
                    logger,
                    "assets.not_found",
                    level=logging.WARNING,
                    resource_class=resource_class.value,
                    client=client,
                    client_path=str(client_path),
                    generic_path=str(generic_path),
                    error=exc.__class__.__name__,
                )
                raise AssetNotFound("File not found") from exc
            provenance = GENERIC
            log_event(
                logger,
                "assets.fallback",
                resource_class=resource_class.value,
                client=client,
                asset=filename,
            )

        data = None
        if spec.parse_json:
            try:
                data = json.loads(content, parse_constant=_reject_constant)
            except ValueError as exc:
                log_event(
                    logger,
                    "assets.invalid_content",
                    level=logging.WARNING,
                    resource_class=resource_class.value,
                    client=client,
                    asset=filename,
                    provenance=provenance,
                    error=str(exc),
                )
                raise InvalidContent("File not found or invalid JSON") from exc

        return Asset(
            filename=filename,
            provenance=provenance,
            content=content,
            data=data,
        )

    @staticmethod
    def _matching_files(
        directory: Path, spec: ResourceSpec, *, include_hidden: bool = False
    ) -> list[str]:
        names = []
        for entry in directory.iterdir():
            if not entry.name.endswith(spec.suffix) or not entry.is_file():
                continue
            if not include_hidden and spec.hidden_prefix and entry.name.startswith(spec.hidden_prefix):
                continue
            names.append(entry.name)
        return names
