from dataclasses import dataclass

from agro_registry.application.dtos.patch import PatchDTO


@dataclass(frozen=True)
class CreateCropDTO:
    name: str
    area: float
    harvest_id: str


@dataclass(frozen=True)
class UpdateCropDTO(PatchDTO):
    name: str | None = None
    area: float | None = None
    harvest_id: str | None = None
