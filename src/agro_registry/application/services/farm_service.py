from __future__ import annotations

import logging
from dataclasses import asdict, replace

from agro_registry.application.dtos.farm_dto import CreateFarmDTO, UpdateFarmDTO
from agro_registry.application.dtos.views import FarmView
from agro_registry.application.guards import ReferentialIntegrityGuard
from agro_registry.application.services.hierarchy_reader import HierarchyReader
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.repositories.interfaces import IRegistryStore
from agro_registry.domain.validators.farm_areas import validate_farm_areas

logger = logging.getLogger(__name__)


class FarmService:
    """CRUD for farms: the owning producer must exist and the areas must add up."""

    def __init__(
        self,
        store: IRegistryStore,
        *,
        guard: ReferentialIntegrityGuard | None = None,
        reader: HierarchyReader | None = None,
    ) -> None:
        self.farms = store.farms
        self.guard = guard or ReferentialIntegrityGuard(store)
        self.reader = reader or HierarchyReader(store)

    def create(self, dto: CreateFarmDTO) -> Farm:
        validate_farm_areas(dto.total_area, dto.arable_area, dto.vegetation_area)
        self.guard.require_producer(dto.producer_id)
        farm = self.farms.create(asdict(dto))
        logger.info("farm %s created for producer %s", farm.id, farm.producer_id)
        return farm

    def list(self) -> list[FarmView]:
        return [self.reader.farm_view(f) for f in self.farms.list()]

    def get(self, farm_id: str) -> FarmView:
        farm = self.guard.require_farm(farm_id)
        return self.reader.farm_view(farm)

    def update(self, farm_id: str, dto: UpdateFarmDTO) -> Farm:
        current = self.guard.require_farm(farm_id)
        changes = dto.changes()
        if "producer_id" in changes:
            self.guard.require_producer(changes["producer_id"])
        # a partial patch is checked against the areas it leaves untouched
        merged = replace(current, **changes)
        validate_farm_areas(merged.total_area, merged.arable_area, merged.vegetation_area)
        farm = self.farms.update(farm_id, changes)
        logger.info("farm %s updated (%s)", farm_id, ", ".join(sorted(changes)) or "no changes")
        return farm

    def delete(self, farm_id: str) -> None:
        self.guard.require_farm(farm_id)
        self.farms.delete(farm_id)
        logger.info("farm %s deleted with its harvests", farm_id)
