"""Read models returned by list/get: a record plus its related records."""

from dataclasses import dataclass

from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.entities.producer import Producer


@dataclass(frozen=True)
class HarvestBranch:
    harvest: Harvest
    crops: tuple[Crop, ...]


@dataclass(frozen=True)
class FarmBranch:
    farm: Farm
    harvests: tuple[HarvestBranch, ...]


@dataclass(frozen=True)
class ProducerView:
    producer: Producer
    farms: tuple[FarmBranch, ...]


@dataclass(frozen=True)
class FarmView:
    farm: Farm
    producer: Producer | None
    harvests: tuple[HarvestBranch, ...]


@dataclass(frozen=True)
class HarvestView:
    harvest: Harvest
    farm: Farm | None
    producer: Producer | None
    crops: tuple[Crop, ...]


@dataclass(frozen=True)
class CropView:
    crop: Crop
    harvest: Harvest | None
    farm: Farm | None
