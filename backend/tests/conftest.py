"""Fixtures compartidas para las pruebas."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from asset_api.core.config import Settings
from asset_api.main import create_app
from asset_api.services.assets import AssetResolver

GENERIC_CSV = "lote,valor\n1,genérico\n"
FERRERO_CSV = "lote,valor\n1,ferrero\n"


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(name="assets_root")
def fixture_assets_root(tmp_path: Path) -> Path:
    """Árbol de assets con archivos genéricos, overrides de `ferrero` y ruido."""
    root = tmp_path / "public"
    write(root / "data" / "a.csv", GENERIC_CSV)
    write(root / "data" / "b.csv", "lote,valor\n2,genérico\n")
    write(root / "data" / "notas.txt", "no es csv")
    write(root / "data" / "ferrero" / "a.csv", FERRERO_CSV)
    write(root / "data" / "ferrero" / "solo_cliente.csv", "lote\n9\n")

    write(root / "nodes" / "mixer.json", '{"name": "mixer", "fields": []}')
    write(root / "nodes" / "oven.json", '{"name": "oven"}')
    write(root / "nodes" / "_template.json", '{"name": "template"}')
    write(root / "nodes" / "broken.json", '{"name": ')
    write(root / "nodes" / "README.md", "# nodos")
    write(root / "nodes" / "ferrero" / "mixer.json", '{"name": "mixer-ferrero"}')
    return root


@pytest.fixture(name="resolver")
def fixture_resolver(assets_root: Path) -> AssetResolver:
    return AssetResolver(assets_root, ["dsm-f", "ferrero", "kerry"], default_client="dsm-f")


@pytest.fixture(name="settings")
def fixture_settings(assets_root: Path) -> Settings:
    return Settings(environment="test", assets_root=assets_root, log_file_path=None)


@pytest.fixture(name="async_client")
async def fixture_async_client(settings: Settings) -> AsyncClient:
    """Retorna un cliente asíncrono contra una app apuntando al árbol temporal."""
    transport = ASGITransport(app=create_app(settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
