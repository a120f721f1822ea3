from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Farm:
    """Rural property. Areas are in hectares."""

    id: str
    name: str
    city: str
    state: str
    total_area: float
    arable_area: float
    vegetation_area: float
    producer_id: str
    created_at: datetime
    updated_at: datetime
