import pytest

from agro_registry.application.dtos.crop_dto import CreateCropDTO, UpdateCropDTO
from agro_registry.application.dtos.farm_dto import CreateFarmDTO
from agro_registry.application.dtos.harvest_dto import CreateHarvestDTO
from agro_registry.application.dtos.producer_dto import CreateProducerDTO
from agro_registry.domain.errors import NotFoundError
from agro_registry.domain.value_objects.document import DocumentType
from agro_registry.presentation.container import build_services
from tests.unit._fakes_store import SpyStore


def _setup():
    store = SpyStore()
    services = build_services(store)
    producer = services.producers.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    farm = services.farms.create(CreateFarmDTO("Fazenda A", "Franca", "SP", 80, 60, 20, producer.id))
    harvest = services.harvests.create(CreateHarvestDTO(2023, "Safra", farm.id))
    other = services.harvests.create(CreateHarvestDTO(2023, "Safrinha", farm.id))
    store.reset()
    return store, services, harvest, other


def test_create_crop_when_harvest_exists():
    _, services, harvest, _ = _setup()
    crop = services.crops.create(CreateCropDTO("Corn", 10, harvest.id))
    assert crop.harvest_id == harvest.id
    assert services.crops.get(crop.id).harvest == harvest


def test_create_crop_for_missing_harvest_fails():
    store, services, _, _ = _setup()
    with pytest.raises(NotFoundError) as err:
        services.crops.create(CreateCropDTO("", 0, "invalid"))
    assert err.value.entity == "Harvest"
    assert store.mutations == []


def test_update_crop_to_new_harvest():
    _, services, harvest, other = _setup()
    crop = services.crops.create(CreateCropDTO("Corn", 10, harvest.id))
    updated = services.crops.update(crop.id, UpdateCropDTO(name="Soybean", harvest_id=other.id))
    assert updated.name == "Soybean"
    assert services.crops.get(crop.id).harvest == other


def test_update_crop_to_missing_harvest_fails():
    store, services, harvest, _ = _setup()
    crop = services.crops.create(CreateCropDTO("Corn", 10, harvest.id))
    store.reset()
    with pytest.raises(NotFoundError):
        services.crops.update(crop.id, UpdateCropDTO(harvest_id="invalid"))
    assert store.mutations == []


def test_update_missing_crop_fails():
    store, services, _, _ = _setup()
    with pytest.raises(NotFoundError):
        services.crops.update("invalid", UpdateCropDTO(name="X"))
    assert store.mutations == []


def test_get_embeds_harvest_and_farm():
    _, services, harvest, _ = _setup()
    crop = services.crops.create(CreateCropDTO("Corn", 10, harvest.id))
    view = services.crops.get(crop.id)
    assert view.harvest == harvest
    assert view.farm.id == harvest.farm_id


def test_delete_crop():
    store, services, harvest, _ = _setup()
    crop = services.crops.create(CreateCropDTO("Corn", 10, harvest.id))
    services.crops.delete(crop.id)
    assert ("delete", crop.id) in store.crops.mutations
    with pytest.raises(NotFoundError):
        services.crops.get(crop.id)


def test_delete_missing_crop_fails():
    store, services, _, _ = _setup()
    with pytest.raises(NotFoundError):
        services.crops.delete("invalid")
    assert store.mutations == []
