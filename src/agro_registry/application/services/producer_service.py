from __future__ import annotations

import logging

from agro_registry.application.dtos.producer_dto import CreateProducerDTO, UpdateProducerDTO
from agro_registry.application.dtos.views import ProducerView
from agro_registry.application.guards import (
    DOCUMENT_TAKEN_MESSAGE,
    ReferentialIntegrityGuard,
    UniquenessGuard,
)
from agro_registry.application.services.hierarchy_reader import HierarchyReader
from agro_registry.domain.entities.producer import Producer
from agro_registry.domain.errors import ConflictError
from agro_registry.domain.repositories.interfaces import DuplicateKeyError, IRegistryStore
from agro_registry.domain.value_objects.document import require_document

logger = logging.getLogger(__name__)


class ProducerService:
    """CRUD for producers guarded by document normalization and uniqueness.

    The uniqueness guard is a check-then-act step; a concurrent writer can
    still slip in between, in which case the store's own constraint raises
    ``DuplicateKeyError`` and it is reported as the same ``ConflictError``.
    """

    def __init__(
        self,
        store: IRegistryStore,
        *,
        guard: ReferentialIntegrityGuard | None = None,
        uniqueness: UniquenessGuard | None = None,
        reader: HierarchyReader | None = None,
    ) -> None:
        self.producers = store.producers
        self.guard = guard or ReferentialIntegrityGuard(store)
        self.uniqueness = uniqueness or UniquenessGuard(store.producers)
        self.reader = reader or HierarchyReader(store)

    def create(self, dto: CreateProducerDTO) -> Producer:
        document = require_document(dto.document)
        self.uniqueness.check_available(document)
        try:
            producer = self.producers.create(
                {"name": dto.name, "document": document, "document_type": dto.document_type}
            )
        except DuplicateKeyError as exc:
            raise ConflictError(DOCUMENT_TAKEN_MESSAGE, {"field": "document"}) from exc
        logger.info("producer %s created", producer.id)
        return producer

    def list(self) -> list[ProducerView]:
        return [self.reader.producer_view(p) for p in self.producers.list()]

    def get(self, producer_id: str) -> ProducerView:
        producer = self.guard.require_producer(producer_id)
        return self.reader.producer_view(producer)

    def update(self, producer_id: str, dto: UpdateProducerDTO) -> Producer:
        self.guard.require_producer(producer_id)
        changes = dto.changes()
        if "document" in changes:
            changes["document"] = require_document(changes["document"])
            self.uniqueness.check_available_excluding(changes["document"], producer_id)
        try:
            producer = self.producers.update(producer_id, changes)
        except DuplicateKeyError as exc:
            raise ConflictError(DOCUMENT_TAKEN_MESSAGE, {"field": "document"}) from exc
        logger.info("producer %s updated (%s)", producer_id, ", ".join(sorted(changes)) or "no changes")
        return producer

    def delete(self, producer_id: str) -> None:
        self.guard.require_producer(producer_id)
        self.producers.delete(producer_id)
        logger.info("producer %s deleted with its farms", producer_id)
