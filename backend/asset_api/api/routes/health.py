"""Endpoint de salud mínimo para validaciones rápidas."""
from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Estado de la API de assets")
def healthcheck() -> dict[str, str]:
    """Indica que la API de assets está viva; no revisa el árbol de archivos."""
    return {"status": "ok"}
