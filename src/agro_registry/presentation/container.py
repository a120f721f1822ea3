from __future__ import annotations

from dataclasses import dataclass

from agro_registry.application.guards import ReferentialIntegrityGuard, UniquenessGuard
from agro_registry.application.services.crop_service import CropService
from agro_registry.application.services.dashboard_service import DashboardService
from agro_registry.application.services.farm_service import FarmService
from agro_registry.application.services.harvest_service import HarvestService
from agro_registry.application.services.hierarchy_reader import HierarchyReader
from agro_registry.application.services.producer_service import ProducerService
from agro_registry.config import Settings
from agro_registry.infrastructure.repositories.memory_store import InMemoryStore
from agro_registry.infrastructure.repositories.sqlite_store import SQLiteStore


@dataclass(frozen=True)
class Services:
    producers: ProducerService
    farms: FarmService
    harvests: HarvestService
    crops: CropService
    dashboard: DashboardService


def build_store(settings: Settings) -> InMemoryStore | SQLiteStore:
    if settings.store == "sqlite":
        return SQLiteStore(db_path=settings.db_path)
    if settings.store == "memory":
        return InMemoryStore()
    raise ValueError(f"unknown AGRO_STORE {settings.store!r} (expected memory|sqlite)")


def build_services(store: InMemoryStore | SQLiteStore) -> Services:
    guard = ReferentialIntegrityGuard(store)
    reader = HierarchyReader(store)
    return Services(
        producers=ProducerService(
            store, guard=guard, uniqueness=UniquenessGuard(store.producers), reader=reader
        ),
        farms=FarmService(store, guard=guard, reader=reader),
        harvests=HarvestService(store, guard=guard, reader=reader),
        crops=CropService(store, guard=guard, reader=reader),
        dashboard=DashboardService(store.dashboard),
    )
