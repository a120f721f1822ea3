from __future__ import annotations

from dataclasses import dataclass

from agro_registry.application.ports.dashboard_port import IDashboardQueries

ARABLE_LABEL = "Arable area"
VEGETATION_LABEL = "Vegetation"


@dataclass(frozen=True)
class DashboardStats:
    total_farms: int
    total_hectares: float
    total_producers: int
    total_crops: int


@dataclass(frozen=True)
class StateCount:
    state: str
    count: int


@dataclass(frozen=True)
class CropArea:
    crop: str
    area: float


@dataclass(frozen=True)
class LandUse:
    type: str
    area: float


class DashboardService:
    """Reporting figures. A sum over nothing is reported as 0, never None."""

    def __init__(self, queries: IDashboardQueries) -> None:
        self.queries = queries

    def get_stats(self) -> DashboardStats:
        return DashboardStats(
            total_farms=self.queries.count_farms(),
            total_hectares=self.queries.sum_total_area() or 0,
            total_producers=self.queries.count_producers(),
            total_crops=self.queries.count_crops(),
        )

    def get_farms_by_state(self) -> list[StateCount]:
        return [StateCount(state=state, count=count) for state, count in self.queries.farms_by_state()]

    def get_crops_by_type(self) -> list[CropArea]:
        return [CropArea(crop=name, area=area or 0) for name, area in self.queries.crop_area_by_name()]

    def get_land_use(self) -> list[LandUse]:
        arable, vegetation = self.queries.sum_land_use()
        return [
            LandUse(type=ARABLE_LABEL, area=arable or 0),
            LandUse(type=VEGETATION_LABEL, area=vegetation or 0),
        ]
