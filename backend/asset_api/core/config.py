"""Configuración central basada en variables de entorno."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientOption(BaseModel):
    """Cliente habilitado junto con su nombre para mostrar."""

    name: str
    value: str


DEFAULT_CLIENTS: tuple[ClientOption, ...] = (
    ClientOption(name="DSM-F", value="dsm-f"),
    ClientOption(name="Ferrero", value="ferrero"),
    ClientOption(name="Ferrero Chocolate", value="ferrero-chocolate"),
    ClientOption(name="Kerry", value="kerry"),
    ClientOption(name="Kerry Requirements", value="kerry-requirements"),
    ClientOption(name="Croda", value="croda"),
    ClientOption(name="Kalbe", value="kalbe"),
)


class Settings(BaseSettings):
    """Valores globales leídos desde `.env` o el entorno."""

    environment: str = "development"
    log_level: str | None = Field(
        default=None,
        description="Nivel de logging global (ej. debug, info, warning). Cuando no se define, usa un valor por ambiente.",
    )
    request_log_level: str = Field(
        default="info",
        description=(
            "Nivel mínimo para registrar solicitudes en middleware. "
            "Valores más altos (warning/error) reducen registros de peticiones exitosas."
        ),
    )
    request_log_skip_prefixes: tuple[str, ...] = Field(
        default=("/api/health", "/favicon", "/docs", "/openapi"),
        description="Prefijos de ruta para los que no se registrarán eventos de request.started/completed.",
    )
    log_file_path: str | None = Field(
        default=None,
        description="Archivo rotativo opcional; sin valor sólo se escribe a stdout.",
    )
    api_prefix: str = "/api"
    assets_root: Path = Field(
        default=Path("public"),
        description="Directorio raíz que contiene `data/` y `nodes/`.",
    )
    data_dir: str = "data"
    nodes_dir: str = "nodes"
    default_client: str = Field(
        default="dsm-f",
        description="Cliente usado cuando la petición no envía X-Client.",
    )
    clients: list[ClientOption] = Field(
        default_factory=lambda: list(DEFAULT_CLIENTS),
        description="Lista de clientes permitidos (JSON en la variable de entorno).",
    )
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ASSET_API_", extra="ignore")

    @property
    def valid_clients(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.clients)

    @model_validator(mode="after")
    def _check_default_client(self) -> "Settings":
        if self.default_client not in self.valid_clients:
            msg = f"default_client '{self.default_client}' no está en la lista de clientes"
            raise ValueError(msg)
        return self


settings = Settings()
