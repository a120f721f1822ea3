from __future__ import annotations

import logging
from dataclasses import asdict

from agro_registry.application.dtos.crop_dto import CreateCropDTO, UpdateCropDTO
from agro_registry.application.dtos.views import CropView
from agro_registry.application.guards import ReferentialIntegrityGuard
from agro_registry.application.services.hierarchy_reader import HierarchyReader
from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.repositories.interfaces import IRegistryStore

logger = logging.getLogger(__name__)


class CropService:
    def __init__(
        self,
        store: IRegistryStore,
        *,
        guard: ReferentialIntegrityGuard | None = None,
        reader: HierarchyReader | None = None,
    ) -> None:
        self.crops = store.crops
        self.guard = guard or ReferentialIntegrityGuard(store)
        self.reader = reader or HierarchyReader(store)

    def create(self, dto: CreateCropDTO) -> Crop:
        self.guard.require_harvest(dto.harvest_id)
        crop = self.crops.create(asdict(dto))
        logger.info("crop %s created for harvest %s", crop.id, crop.harvest_id)
        return crop

    def list(self) -> list[CropView]:
        return [self.reader.crop_view(c) for c in self.crops.list()]

    def get(self, crop_id: str) -> CropView:
        crop = self.guard.require_crop(crop_id)
        return self.reader.crop_view(crop)

    def update(self, crop_id: str, dto: UpdateCropDTO) -> Crop:
        self.guard.require_crop(crop_id)
        changes = dto.changes()
        if "harvest_id" in changes:
            self.guard.require_harvest(changes["harvest_id"])
        crop = self.crops.update(crop_id, changes)
        logger.info("crop %s updated (%s)", crop_id, ", ".join(sorted(changes)) or "no changes")
        return crop

    def delete(self, crop_id: str) -> None:
        self.guard.require_crop(crop_id)
        self.crops.delete(crop_id)
        logger.info("crop %s deleted", crop_id)
