from fastapi import APIRouter

from agro_registry.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:  # type: ignore[misc]
    """Liveness probe; also reports which store backend the process was configured with."""
    return {"status": "ok", "store": settings.store}
