from dataclasses import dataclass

from agro_registry.application.dtos.patch import PatchDTO


@dataclass(frozen=True)
class CreateFarmDTO:
    name: str
    city: str
    state: str
    total_area: float
    arable_area: float
    vegetation_area: float
    producer_id: str


@dataclass(frozen=True)
class UpdateFarmDTO(PatchDTO):
    name: str | None = None
    city: str | None = None
    state: str | None = None
    total_area: float | None = None
    arable_area: float | None = None
    vegetation_area: float | None = None
    producer_id: str | None = None
