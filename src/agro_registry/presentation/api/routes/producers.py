from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import Response

from agro_registry.presentation.api import presenters
from agro_registry.presentation.api.dependencies import get_services
from agro_registry.presentation.api.schemas import ProducerCreate, ProducerUpdate
from agro_registry.presentation.container import Services

router = APIRouter(prefix="/producers", tags=["producers"])


@router.post("", status_code=201)
def create_producer(body: ProducerCreate, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.producers.create(body.to_dto()))  # type: ignore[return-value]


@router.get("")
def list_producers(services: Services = Depends(get_services)) -> list[dict[str, Any]]:  # type: ignore[misc]
    return [presenters.producer_view(v) for v in services.producers.list()]


@router.get("/{producer_id}")
def get_producer(producer_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.producer_view(services.producers.get(producer_id))


@router.patch("/{producer_id}")
def update_producer(
    producer_id: str, body: ProducerUpdate, services: Services = Depends(get_services)
) -> dict[str, Any]:  # type: ignore[misc]
    return presenters.record(services.producers.update(producer_id, body.to_dto()))  # type: ignore[return-value]


@router.delete("/{producer_id}", status_code=204)
def delete_producer(producer_id: str, services: Services = Depends(get_services)) -> Response:  # type: ignore[misc]
    services.producers.delete(producer_id)
    return Response(status_code=204)
