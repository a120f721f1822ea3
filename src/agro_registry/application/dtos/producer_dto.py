from dataclasses import dataclass

from agro_registry.application.dtos.patch import PatchDTO
from agro_registry.domain.value_objects.document import DocumentType


@dataclass(frozen=True)
class CreateProducerDTO:
    name: str
    document: str  # raw, normalized by the service
    document_type: DocumentType


@dataclass(frozen=True)
class UpdateProducerDTO(PatchDTO):
    name: str | None = None
    document: str | None = None
    document_type: DocumentType | None = None
