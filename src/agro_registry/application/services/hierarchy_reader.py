from __future__ import annotations

from agro_registry.application.dtos.views import (
    CropView,
    FarmBranch,
    FarmView,
    HarvestBranch,
    HarvestView,
    ProducerView,
)
from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.entities.producer import Producer
from agro_registry.domain.repositories.interfaces import IRegistryStore


class HierarchyReader:
    """Assembles read models by walking the producer/farm/harvest/crop tree."""

    def __init__(self, store: IRegistryStore) -> None:
        self.store = store

    def harvest_branch(self, harvest: Harvest) -> HarvestBranch:
        return HarvestBranch(harvest=harvest, crops=tuple(self.store.crops.list(harvest_id=harvest.id)))

    def farm_branch(self, farm: Farm) -> FarmBranch:
        harvests = self.store.harvests.list(farm_id=farm.id)
        return FarmBranch(farm=farm, harvests=tuple(self.harvest_branch(h) for h in harvests))

    def producer_view(self, producer: Producer) -> ProducerView:
        farms = self.store.farms.list(producer_id=producer.id)
        return ProducerView(producer=producer, farms=tuple(self.farm_branch(f) for f in farms))

    def farm_view(self, farm: Farm) -> FarmView:
        branch = self.farm_branch(farm)
        return FarmView(
            farm=farm,
            producer=self.store.producers.get(farm.producer_id),
            harvests=branch.harvests,
        )

    def harvest_view(self, harvest: Harvest) -> HarvestView:
        farm = self.store.farms.get(harvest.farm_id)
        producer = self.store.producers.get(farm.producer_id) if farm else None
        return HarvestView(
            harvest=harvest,
            farm=farm,
            producer=producer,
            crops=tuple(self.store.crops.list(harvest_id=harvest.id)),
        )

    def crop_view(self, crop: Crop) -> CropView:
        harvest = self.store.harvests.get(crop.harvest_id)
        farm = self.store.farms.get(harvest.farm_id) if harvest else None
        return CropView(crop=crop, harvest=harvest, farm=farm)
