from collections.abc import Sequence
from typing import Protocol


class IDashboardQueries(Protocol):
    """Grouping/summation queries behind the dashboard.

    Sums return ``None`` when there is nothing to sum, like SQL ``SUM``.
    """

    def count_producers(self) -> int: ...
    def count_farms(self) -> int: ...
    def count_crops(self) -> int: ...
    def sum_total_area(self) -> float | None: ...
    def farms_by_state(self) -> Sequence[tuple[str, int]]: ...
    def crop_area_by_name(self) -> Sequence[tuple[str, float | None]]: ...
    def sum_land_use(self) -> tuple[float | None, float | None]: ...
