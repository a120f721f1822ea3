from __future__ import annotations

import logging
from dataclasses import asdict

from agro_registry.application.dtos.harvest_dto import CreateHarvestDTO, UpdateHarvestDTO
from agro_registry.application.dtos.views import HarvestView
from agro_registry.application.guards import ReferentialIntegrityGuard
from agro_registry.application.services.hierarchy_reader import HierarchyReader
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.repositories.interfaces import IRegistryStore

logger = logging.getLogger(__name__)


class HarvestService:
    def __init__(
        self,
        store: IRegistryStore,
        *,
        guard: ReferentialIntegrityGuard | None = None,
        reader: HierarchyReader | None = None,
    ) -> None:
        self.harvests = store.harvests
        self.guard = guard or ReferentialIntegrityGuard(store)
        self.reader = reader or HierarchyReader(store)

    def create(self, dto: CreateHarvestDTO) -> Harvest:
        self.guard.require_farm(dto.farm_id)
        harvest = self.harvests.create(asdict(dto))
        logger.info("harvest %s created for farm %s", harvest.id, harvest.farm_id)
        return harvest

    def list(self) -> list[HarvestView]:
        return [self.reader.harvest_view(h) for h in self.harvests.list()]

    def get(self, harvest_id: str) -> HarvestView:
        harvest = self.guard.require_harvest(harvest_id)
        return self.reader.harvest_view(harvest)

    def update(self, harvest_id: str, dto: UpdateHarvestDTO) -> Harvest:
        self.guard.require_harvest(harvest_id)
        changes = dto.changes()
        if "farm_id" in changes:
            self.guard.require_farm(changes["farm_id"])
        harvest = self.harvests.update(harvest_id, changes)
        logger.info("harvest %s updated (%s)", harvest_id, ", ".join(sorted(changes)) or "no changes")
        return harvest

    def delete(self, harvest_id: str) -> None:
        self.guard.require_harvest(harvest_id)
        self.harvests.delete(harvest_id)
        logger.info("harvest %s deleted with its crops", harvest_id)
