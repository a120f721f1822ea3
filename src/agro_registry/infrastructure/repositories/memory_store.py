from __future__ import annotations

import threading
import uuid
from collections import Counter, defaultdict
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from typing import Any, Generic, TypeVar

from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.entities.producer import Producer
from agro_registry.domain.repositories.interfaces import DuplicateKeyError
from agro_registry.domain.value_objects.document import Document, DocumentType
from agro_registry.infrastructure.clock import Clock, SystemClock

T = TypeVar("T", Producer, Farm, Harvest, Crop)


class _InMemoryRepository(Generic[T]):
    entity: type[T]

    def __init__(self, store: InMemoryStore, table: dict[str, T]) -> None:
        self._store = store
        self._table = table

    def get(self, entity_id: str) -> T | None:
        with self._store.lock:
            return self._table.get(entity_id)

    def _select(self, predicate: Callable[[T], bool] = lambda r: True) -> list[T]:
        with self._store.lock:
            # newest first; reversed() keeps insertion order as tie-break
            rows = [r for r in reversed(list(self._table.values())) if predicate(r)]
        return sorted(rows, key=lambda r: r.created_at, reverse=True)

    def _coerce(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return dict(fields)

    def _check(self, record: T) -> None:
        """Store-level constraints, run under the lock before a write."""

    def _cascade(self, entity_id: str) -> None:
        """Remove child rows, run under the lock before a delete."""

    def create(self, fields: Mapping[str, Any]) -> T:
        now = self._store.clock.now()
        record = self.entity(
            id=str(uuid.uuid4()), **self._coerce(fields), created_at=now, updated_at=now
        )
        with self._store.lock:
            self._check(record)
            self._table[record.id] = record
        return record

    def update(self, entity_id: str, changes: Mapping[str, Any]) -> T:
        with self._store.lock:
            record = replace(
                self._table[entity_id],
                **self._coerce(changes),
                updated_at=self._store.clock.now(),
            )
            self._check(record)
            self._table[entity_id] = record
        return record

    def delete(self, entity_id: str) -> None:
        with self._store.lock:
            self._cascade(entity_id)
            del self._table[entity_id]


class InMemoryProducerRepository(_InMemoryRepository[Producer]):
    entity = Producer

    def find_by_document(self, document: str, exclude_id: str | None = None) -> Producer | None:
        with self._store.lock:
            return next(
                (p for p in self._table.values() if p.document == document and p.id != exclude_id),
                None,
            )

    def list(self) -> Sequence[Producer]:
        return self._select()

    def _coerce(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        out = dict(fields)
        if "document" in out:
            out["document"] = Document(out["document"])
        if "document_type" in out:
            out["document_type"] = DocumentType(out["document_type"])
        return out

    def _check(self, record: Producer) -> None:
        if self.find_by_document(record.document, exclude_id=record.id) is not None:
            raise DuplicateKeyError("document", record.document)

    def _cascade(self, entity_id: str) -> None:
        for farm in self._store.farms.list(producer_id=entity_id):
            self._store.farms.delete(farm.id)


class InMemoryFarmRepository(_InMemoryRepository[Farm]):
    entity = Farm

    def list(self, producer_id: str | None = None) -> Sequence[Farm]:
        return self._select(lambda f: producer_id is None or f.producer_id == producer_id)

    def _cascade(self, entity_id: str) -> None:
        for harvest in self._store.harvests.list(farm_id=entity_id):
            self._store.harvests.delete(harvest.id)


class InMemoryHarvestRepository(_InMemoryRepository[Harvest]):
    entity = Harvest

    def list(self, farm_id: str | None = None) -> Sequence[Harvest]:
        rows = self._select(lambda h: farm_id is None or h.farm_id == farm_id)
        # created_at order is already in place; stable sort keeps it within a year
        return sorted(rows, key=lambda h: h.year, reverse=True)

    def _cascade(self, entity_id: str) -> None:
        for crop in self._store.crops.list(harvest_id=entity_id):
            self._store.crops.delete(crop.id)


class InMemoryCropRepository(_InMemoryRepository[Crop]):
    entity = Crop

    def list(self, harvest_id: str | None = None) -> Sequence[Crop]:
        return self._select(lambda c: harvest_id is None or c.harvest_id == harvest_id)


class InMemoryDashboardQueries:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def count_producers(self) -> int:
        return len(self._store.producers.list())

    def count_farms(self) -> int:
        return len(self._store.farms.list())

    def count_crops(self) -> int:
        return len(self._store.crops.list())

    def sum_total_area(self) -> float | None:
        farms = self._store.farms.list()
        return sum(f.total_area for f in farms) if farms else None

    def farms_by_state(self) -> Sequence[tuple[str, int]]:
        counts = Counter(f.state for f in self._store.farms.list())
        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    def crop_area_by_name(self) -> Sequence[tuple[str, float | None]]:
        areas: dict[str, float] = defaultdict(float)
        for crop in self._store.crops.list():
            areas[crop.name] += crop.area
        return sorted(areas.items(), key=lambda item: (-item[1], item[0]))

    def sum_land_use(self) -> tuple[float | None, float | None]:
        farms = self._store.farms.list()
        if not farms:
            return None, None
        return sum(f.arable_area for f in farms), sum(f.vegetation_area for f in farms)


class InMemoryStore:
    """Dictionary-backed store for development and tests. Not persistent."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or SystemClock()
        # re-entrant: cascading deletes call back into sibling repositories
        self.lock = threading.RLock()
        self.producers = InMemoryProducerRepository(self, {})
        self.farms = InMemoryFarmRepository(self, {})
        self.harvests = InMemoryHarvestRepository(self, {})
        self.crops = InMemoryCropRepository(self, {})
        self.dashboard = InMemoryDashboardQueries(self)
