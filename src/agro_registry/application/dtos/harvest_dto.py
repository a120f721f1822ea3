from dataclasses import dataclass

from agro_registry.application.dtos.patch import PatchDTO


@dataclass(frozen=True)
class CreateHarvestDTO:
    year: int
    season: str
    farm_id: str


@dataclass(frozen=True)
class UpdateHarvestDTO(PatchDTO):
    year: int | None = None
    season: str | None = None
    farm_id: str | None = None
