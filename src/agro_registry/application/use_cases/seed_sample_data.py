from __future__ import annotations

from dataclasses import dataclass

from agro_registry.application.dtos.crop_dto import CreateCropDTO
from agro_registry.application.dtos.farm_dto import CreateFarmDTO
from agro_registry.application.dtos.harvest_dto import CreateHarvestDTO
from agro_registry.application.dtos.producer_dto import CreateProducerDTO
from agro_registry.application.services.crop_service import CropService
from agro_registry.application.services.farm_service import FarmService
from agro_registry.application.services.harvest_service import HarvestService
from agro_registry.application.services.producer_service import ProducerService
from agro_registry.domain.value_objects.document import DocumentType

# (name, document, document_type)
PRODUCERS = [
    ("João Silva Santos", "123.456.789-01", DocumentType.CPF),
    ("Maria Oliveira Costa", "987.654.321-00", DocumentType.CPF),
    ("Agropecuária Três Irmãos Ltda", "12.345.678/0001-95", DocumentType.CNPJ),
    ("Fazendas Reunidas do Cerrado S.A.", "98.765.432/0001-76", DocumentType.CNPJ),
    ("Carlos Eduardo Ferreira", "111.222.333-44", DocumentType.CPF),
]

# (producer index, name, city, state, total, arable, vegetation)
FARMS = [
    (0, "Fazenda São João", "Ribeirão Preto", "SP", 150.0, 120.0, 30.0),
    (0, "Sítio Boa Vista", "Franca", "SP", 80.0, 60.0, 20.0),
    (1, "Fazenda Santa Maria", "Uberlândia", "MG", 200.0, 160.0, 40.0),
    (2, "Fazenda Três Irmãos", "Sorriso", "MT", 1000.0, 800.0, 200.0),
    (2, "Fazenda Nova Esperança", "Lucas do Rio Verde", "MT", 750.0, 600.0, 150.0),
    (3, "Fazenda Cerrado Grande", "Luís Eduardo Magalhães", "BA", 2000.0, 1600.0, 400.0),
    (3, "Fazenda Planalto", "Barreiras", "BA", 1500.0, 1200.0, 300.0),
    (4, "Fazenda Bela Vista", "Rio Verde", "GO", 300.0, 240.0, 60.0),
]

# (farm index, year, season)
HARVESTS = [
    (0, 2023, "Safra"),
    (0, 2023, "Safrinha"),
    (1, 2023, "Safra"),
    (2, 2023, "Safra"),
    (3, 2023, "Safra"),
    (3, 2023, "Safrinha"),
    (4, 2024, "Safra"),
    (5, 2024, "Safra"),
    (5, 2024, "Safrinha"),
    (6, 2024, "Safra"),
    (7, 2024, "Safra"),
]

# (harvest index, name, area)
CROPS = [
    (0, "Soja", 80.0), (0, "Milho", 40.0),
    (1, "Milho", 60.0), (1, "Feijão", 20.0),
    (2, "Café", 35.0), (2, "Cana-de-açúcar", 25.0),
    (3, "Soja", 100.0), (3, "Milho", 60.0),
    (4, "Soja", 400.0), (4, "Algodão", 200.0), (4, "Milho", 200.0),
    (5, "Milho", 300.0), (5, "Feijão", 100.0),
    (6, "Soja", 350.0), (6, "Algodão", 250.0),
    (7, "Soja", 800.0), (7, "Algodão", 400.0), (7, "Milho", 400.0),
    (8, "Milho", 600.0), (8, "Feijão", 200.0),
    (9, "Soja", 600.0), (9, "Milho", 400.0), (9, "Algodão", 200.0),
    (10, "Soja", 150.0), (10, "Milho", 90.0),
]


@dataclass(frozen=True)
class SeedResult:
    producers: int
    farms: int
    harvests: int
    crops: int


class SeedSampleDataUseCase:
    """Replaces the registry contents with the sample data set.

    Records go through the services, so the sample data passes the same
    guards as API traffic.
    """

    def __init__(
        self,
        producers: ProducerService,
        farms: FarmService,
        harvests: HarvestService,
        crops: CropService,
    ) -> None:
        self.producers = producers
        self.farms = farms
        self.harvests = harvests
        self.crops = crops

    def execute(self) -> SeedResult:
        for view in self.producers.list():
            self.producers.delete(view.producer.id)

        producer_ids = [
            self.producers.create(CreateProducerDTO(name, document, kind)).id
            for name, document, kind in PRODUCERS
        ]
        farm_ids = [
            self.farms.create(
                CreateFarmDTO(name, city, state, total, arable, vegetation, producer_ids[p])
            ).id
            for p, name, city, state, total, arable, vegetation in FARMS
        ]
        harvest_ids = [
            self.harvests.create(CreateHarvestDTO(year, season, farm_ids[f])).id
            for f, year, season in HARVESTS
        ]
        for h, name, area in CROPS:
            self.crops.create(CreateCropDTO(name, area, harvest_ids[h]))

        return SeedResult(len(producer_ids), len(farm_ids), len(harvest_ids), len(CROPS))
