from agro_registry.application.dtos.crop_dto import CreateCropDTO
from agro_registry.application.dtos.farm_dto import CreateFarmDTO
from agro_registry.application.dtos.harvest_dto import CreateHarvestDTO
from agro_registry.application.dtos.producer_dto import CreateProducerDTO
from agro_registry.application.services.dashboard_service import (
    CropArea,
    DashboardService,
    DashboardStats,
    LandUse,
    StateCount,
)
from agro_registry.domain.value_objects.document import DocumentType
from agro_registry.infrastructure.repositories.memory_store import InMemoryStore
from agro_registry.presentation.container import build_services


class FakeQueries:
    def __init__(self, total_area=500.0, crop_areas=None, land_use=(120.0, 80.0)) -> None:
        self.total_area = total_area
        self.crop_areas = crop_areas if crop_areas is not None else [("Soja", 100.0), ("Milho", 50.0)]
        self.land_use = land_use
    def count_producers(self):
        return 5
    def count_farms(self):
        return 10
    def count_crops(self):
        return 20
    def sum_total_area(self):
        return self.total_area
    def farms_by_state(self):
        return [("SP", 7), ("MG", 3)]
    def crop_area_by_name(self):
        return self.crop_areas
    def sum_land_use(self):
        return self.land_use


def test_stats():
    result = DashboardService(FakeQueries()).get_stats()
    assert result == DashboardStats(total_farms=10, total_hectares=500.0, total_producers=5, total_crops=20)


def test_stats_null_area_is_zero():
    assert DashboardService(FakeQueries(total_area=None)).get_stats().total_hectares == 0


def test_farms_by_state():
    assert DashboardService(FakeQueries()).get_farms_by_state() == [StateCount("SP", 7), StateCount("MG", 3)]


def test_crops_by_type_null_area_is_zero():
    service = DashboardService(FakeQueries(crop_areas=[("Arroz", None)]))
    assert service.get_crops_by_type() == [CropArea("Arroz", 0)]


def test_land_use():
    assert DashboardService(FakeQueries()).get_land_use() == [
        LandUse("Arable area", 120.0),
        LandUse("Vegetation", 80.0),
    ]
    assert [r.area for r in DashboardService(FakeQueries(land_use=(None, None))).get_land_use()] == [0, 0]


def test_dashboard_over_memory_store():
    store = InMemoryStore()
    services = build_services(store)
    assert services.dashboard.get_stats() == DashboardStats(0, 0, 0, 0)

    p = services.producers.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    sp = services.farms.create(CreateFarmDTO("A", "Franca", "SP", 100, 60, 40, p.id))
    services.farms.create(CreateFarmDTO("B", "Franca", "SP", 50, 20, 10, p.id))
    services.farms.create(CreateFarmDTO("C", "Sorriso", "MT", 200, 100, 50, p.id))
    h = services.harvests.create(CreateHarvestDTO(2024, "Safra", sp.id))
    services.crops.create(CreateCropDTO("Milho", 30, h.id))
    services.crops.create(CreateCropDTO("Soja", 20, h.id))
    services.crops.create(CreateCropDTO("Soja", 25, h.id))

    assert services.dashboard.get_stats() == DashboardStats(3, 350, 1, 3)
    assert services.dashboard.get_farms_by_state() == [StateCount("SP", 2), StateCount("MT", 1)]
    assert services.dashboard.get_crops_by_type() == [CropArea("Soja", 45), CropArea("Milho", 30)]
    assert services.dashboard.get_land_use() == [LandUse("Arable area", 180), LandUse("Vegetation", 100)]
