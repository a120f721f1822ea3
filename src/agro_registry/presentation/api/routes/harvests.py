from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import Response

from agro_registry.presentation.api import presenters
from agro_registry.presentation.api.dependencies import get_services
from agro_registry.presentation.api.schemas import HarvestCreate, HarvestUpdate
from agro_registry.presentation.container import Services

router = APIRouter(prefix="/harvests", tags=["harvests"])


@router.post("", status_code=201)
def create_harvest(body: HarvestCreate, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.harvests.create(body.to_dto()))  # type: ignore[return-value]


@router.get("")
def list_harvests(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [presenters.harvest_view(v) for v in services.harvests.list()]


@router.get("/{harvest_id}")
def get_harvest(harvest_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.harvest_view(services.harvests.get(harvest_id))


@router.patch("/{harvest_id}")
def update_harvest(
    harvest_id: str, body: HarvestUpdate, services: Services = Depends(get_services)
) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.harvests.update(harvest_id, body.to_dto()))  # type: ignore[return-value]


@router.delete("/{harvest_id}", status_code=204)
def delete_harvest(harvest_id: str, services: Services = Depends(get_services)) -> Response:  # type: ignore[misc]
    services.harvests.delete(harvest_id)
    return Response(status_code=204)
