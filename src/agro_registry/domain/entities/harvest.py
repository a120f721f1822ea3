from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Harvest:
    id: str
    year: int
    season: str  # free-form, e.g. "Safra" | "Safrinha"
    farm_id: str
    created_at: datetime
    updated_at: datetime
