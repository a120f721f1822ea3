"""Request bodies. Shape checks only; domain rules live in the services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agro_registry.application.dtos.crop_dto import CreateCropDTO, UpdateCropDTO
from agro_registry.application.dtos.farm_dto import CreateFarmDTO, UpdateFarmDTO
from agro_registry.application.dtos.harvest_dto import CreateHarvestDTO, UpdateHarvestDTO
from agro_registry.application.dtos.producer_dto import CreateProducerDTO, UpdateProducerDTO
from agro_registry.domain.value_objects.document import DocumentType


class _Body(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ProducerCreate(_Body):
    name: str = Field(..., min_length=1, description="Producer display name")
    document: str = Field(..., pattern=r"\d", description="CPF or CNPJ, punctuation allowed")
    document_type: DocumentType

    def to_dto(self) -> CreateProducerDTO:
        return CreateProducerDTO(**self.model_dump())


class ProducerUpdate(_Body):
    name: str | None = Field(None, min_length=1)
    document: str | None = Field(None, pattern=r"\d")
    document_type: DocumentType | None = None

    def to_dto(self) -> UpdateProducerDTO:
        return UpdateProducerDTO(**self.model_dump(exclude_unset=True))


class FarmCreate(_Body):
    name: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=2, max_length=2, description="Two-letter state code")
    total_area: float = Field(..., ge=0, description="Hectares")
    arable_area: float = Field(..., ge=0, description="Hectares")
    vegetation_area: float = Field(..., ge=0, description="Hectares")
    producer_id: str = Field(..., min_length=1)

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={"example": {
            "name": "Fazenda São João",
            "city": "Ribeirão Preto",
            "state": "SP",
            "total_area": 150.0,
            "arable_area": 120.0,
            "vegetation_area": 30.0,
            "producer_id": "3f0c2d3e-8d6a-4c1e-9a57-2b1f4c6d7e80",
        }},
    )

    def to_dto(self) -> CreateFarmDTO:
        return CreateFarmDTO(**self.model_dump())


class FarmUpdate(_Body):
    name: str | None = Field(None, min_length=1)
    city: str | None = Field(None, min_length=1)
    state: str | None = Field(None, min_length=2, max_length=2)
    total_area: float | None = Field(None, ge=0)
    arable_area: float | None = Field(None, ge=0)
    vegetation_area: float | None = Field(None, ge=0)
    producer_id: str | None = Field(None, min_length=1)

    def to_dto(self) -> UpdateFarmDTO:
        return UpdateFarmDTO(**self.model_dump(exclude_unset=True))


class HarvestCreate(_Body):
    year: int
    season: str = Field(..., min_length=1, description='e.g. "Safra", "Safrinha"')
    farm_id: str = Field(..., min_length=1)

    def to_dto(self) -> CreateHarvestDTO:
        return CreateHarvestDTO(**self.model_dump())


class HarvestUpdate(_Body):
    year: int | None = None
    season: str | None = Field(None, min_length=1)
    farm_id: str | None = Field(None, min_length=1)

    def to_dto(self) -> UpdateHarvestDTO:
        return UpdateHarvestDTO(**self.model_dump(exclude_unset=True))


class CropCreate(_Body):
    name: str = Field(..., min_length=1)
    area: float = Field(..., ge=0, description="Planted hectares")
    harvest_id: str = Field(..., min_length=1)

    def to_dto(self) -> CreateCropDTO:
        return CreateCropDTO(**self.model_dump())


class CropUpdate(_Body):
    name: str | None = Field(None, min_length=1)
    area: float | None = Field(None, ge=0)
    harvest_id: str | None = Field(None, min_length=1)

    def to_dto(self) -> UpdateCropDTO:
        return UpdateCropDTO(**self.model_dump(exclude_unset=True))
