from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import Response

from agro_registry.presentation.api import presenters
from agro_registry.presentation.api.dependencies import get_services
from agro_registry.presentation.api.schemas import CropCreate, CropUpdate
from agro_registry.presentation.container import Services

router = APIRouter(prefix="/crops", tags=["crops"])


@router.post("", status_code=201)
def create_crop(body: CropCreate, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.crops.create(body.to_dto()))  # type: ignore[return-value]


@router.get("")
def list_crops(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [presenters.crop_view(v) for v in services.crops.list()]


@router.get("/{crop_id}")
def get_crop(crop_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.crop_view(services.crops.get(crop_id))


@router.patch("/{crop_id}")
def update_crop(
    crop_id: str, body: CropUpdate, services: Services = Depends(get_services)
) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.crops.update(crop_id, body.to_dto()))  # type: ignore[return-value]


@router.delete("/{crop_id}", status_code=204)
def delete_crop(crop_id: str, services: Services = Depends(get_services)) -> Response:  # type: ignore[misc]
    services.crops.delete(crop_id)
    return Response(status_code=204)
