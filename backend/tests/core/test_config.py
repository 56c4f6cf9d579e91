"""Pruebas de la configuración basada en entorno."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from asset_api.core.config import Settings


def test_defaults_expose_seven_clients() -> None:
    settings = Settings(_env_file=None)

    assert settings.default_client == "dsm-f"
    assert settings.valid_clients[:2] == ("dsm-f", "ferrero")
    assert len(settings.valid_clients) == 7


def test_clients_read_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ASSET_API_ASSETS_ROOT", str(tmp_path))
    monkeypatch.setenv("ASSET_API_CLIENTS", '[{"name": "Acme", "value": "acme"}]')
    monkeypatch.setenv("ASSET_API_DEFAULT_CLIENT", "acme")

    settings = Settings(_env_file=None)

    assert settings.assets_root == tmp_path
    assert settings.valid_clients == ("acme",)


def test_default_client_outside_allow_list_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_client="acme")
