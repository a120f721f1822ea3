from dataclasses import dataclass
from datetime import datetime

from agro_registry.domain.value_objects.document import Document, DocumentType


@dataclass(frozen=True)
class Producer:
    id: str
    name: str
    document: Document
    document_type: DocumentType
    created_at: datetime
    updated_at: datetime
