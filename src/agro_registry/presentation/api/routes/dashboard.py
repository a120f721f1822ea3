from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends

from agro_registry.presentation.api.dependencies import get_services
from agro_registry.presentation.container import Services

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats")
def stats(services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return asdict(services.dashboard.get_stats())


@router.get("/farms-by-state")
def farms_by_state(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [asdict(row) for row in services.dashboard.get_farms_by_state()]


@router.get("/crops-by-type")
def crops_by_type(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [asdict(row) for row in services.dashboard.get_crops_by_type()]


@router.get("/land-use")
def land_use(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [asdict(row) for row in services.dashboard.get_land_use()]
