from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Crop:
    id: str
    name: str
    area: float
    harvest_id: str
    created_at: datetime
    updated_at: datetime
