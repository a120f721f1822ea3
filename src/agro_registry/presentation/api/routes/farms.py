from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import Response

from agro_registry.presentation.api import presenters
from agro_registry.presentation.api.dependencies import get_services
from agro_registry.presentation.api.schemas import FarmCreate, FarmUpdate
from agro_registry.presentation.container import Services

router = APIRouter(prefix="/farms", tags=["farms"])


@router.post("", status_code=201)
def create_farm(body: FarmCreate, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.farms.create(body.to_dto()))  # type: ignore[return-value]


@router.get("")
def list_farms(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [presenters.farm_view(v) for v in services.farms.list()]


@router.get("/{farm_id}")
def get_farm(farm_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.farm_view(services.farms.get(farm_id))


@router.patch("/{farm_id}")
def update_farm(
    farm_id: str, body: FarmUpdate, services: Services = Depends(get_services)
) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.farms.update(farm_id, body.to_dto()))  # type: ignore[return-value]


@router.delete("/{farm_id}", status_code=204)
def delete_farm(farm_id: str, services: Services = Depends(get_services)) -> Response:  # type: ignore[misc]
    services.farms.delete(farm_id)
    return Response(status_code=204)
