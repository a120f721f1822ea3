from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.entities.producer import Producer


class DuplicateKeyError(Exception):
    """Raised by a store when its own unique constraint rejects a write."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"duplicate value for {field}: {value}")


class IProducerRepository(Protocol):
    def get(self, producer_id: str) -> Producer | None: ...
    def find_by_document(self, document: str, exclude_id: str | None = None) -> Producer | None: ...
    def list(self) -> Sequence[Producer]: ...
    def create(self, fields: Mapping[str, Any]) -> Producer: ...
    def update(self, producer_id: str, changes: Mapping[str, Any]) -> Producer: ...
    def delete(self, producer_id: str) -> None: ...


class IFarmRepository(Protocol):
    def get(self, farm_id: str) -> Farm | None: ...
    def list(self, producer_id: str | None = None) -> Sequence[Farm]: ...
    def create(self, fields: Mapping[str, Any]) -> Farm: ...
    def update(self, farm_id: str, changes: Mapping[str, Any]) -> Farm: ...
    def delete(self, farm_id: str) -> None: ...


class IHarvestRepository(Protocol):
    def get(self, harvest_id: str) -> Harvest | None: ...
    def list(self, farm_id: str | None = None) -> Sequence[Harvest]: ...
    def create(self, fields: Mapping[str, Any]) -> Harvest: ...
    def update(self, harvest_id: str, changes: Mapping[str, Any]) -> Harvest: ...
    def delete(self, harvest_id: str) -> None: ...


class ICropRepository(Protocol):
    def get(self, crop_id: str) -> Crop | None: ...
    def list(self, harvest_id: str | None = None) -> Sequence[Crop]: ...
    def create(self, fields: Mapping[str, Any]) -> Crop: ...
    def update(self, crop_id: str, changes: Mapping[str, Any]) -> Crop: ...
    def delete(self, crop_id: str) -> None: ...


class IRegistryStore(Protocol):
    """Groups the four repositories of one backing store.

    ``delete`` on any repository removes the record's descendants as well
    (producer -> farms -> harvests -> crops).
    """

    producers: IProducerRepository
    farms: IFarmRepository
    harvests: IHarvestRepository
    crops: ICropRepository
