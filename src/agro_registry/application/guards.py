"""
Guards run by the entity services before any mutation reaches the store.

A guard either passes (optionally handing back the record it looked up) or
raises a ``DomainError``. Guards hold no state of their own; every check reads
fresh data from the store.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.entities.producer import Producer
from agro_registry.domain.errors import ConflictError, NotFoundError
from agro_registry.domain.repositories.interfaces import (
    IProducerRepository,
    IRegistryStore,
)

logger = logging.getLogger(__name__)

DOCUMENT_TAKEN_MESSAGE = "CPF/CNPJ already registered"


class EntityKind(str, Enum):
    PRODUCER = "Producer"
    FARM = "Farm"
    HARVEST = "Harvest"
    CROP = "Crop"


class ReferentialIntegrityGuard:
    """Confirms a referenced record exists and returns it."""

    def __init__(self, store: IRegistryStore) -> None:
        self._repositories: dict[EntityKind, Any] = {
            EntityKind.PRODUCER: store.producers,
            EntityKind.FARM: store.farms,
            EntityKind.HARVEST: store.harvests,
            EntityKind.CROP: store.crops,
        }

    def require_exists(self, kind: EntityKind, entity_id: str) -> Any:
        record = self._repositories[kind].get(entity_id)
        if record is None:
            logger.warning("%s %s not found", kind.value, entity_id)
            raise NotFoundError(kind.value, entity_id)
        return record

    def require_producer(self, producer_id: str) -> Producer:
        return self.require_exists(EntityKind.PRODUCER, producer_id)

    def require_farm(self, farm_id: str) -> Farm:
        return self.require_exists(EntityKind.FARM, farm_id)

    def require_harvest(self, harvest_id: str) -> Harvest:
        return self.require_exists(EntityKind.HARVEST, harvest_id)

    def require_crop(self, crop_id: str) -> Crop:
        return self.require_exists(EntityKind.CROP, crop_id)


class UniquenessGuard:
    """Confirms no other producer already holds a normalized document."""

    def __init__(self, producers: IProducerRepository) -> None:
        self.producers = producers

    def check_available(self, document: str) -> None:
        if self.producers.find_by_document(document) is not None:
            logger.warning("document %s already registered", document)
            raise ConflictError(DOCUMENT_TAKEN_MESSAGE, {"field": "document"})

    def check_available_excluding(self, document: str, current_id: str) -> None:
        if self.producers.find_by_document(document, exclude_id=current_id) is not None:
            logger.warning("document %s already registered to another producer", document)
            raise ConflictError(DOCUMENT_TAKEN_MESSAGE, {"field": "document"})
