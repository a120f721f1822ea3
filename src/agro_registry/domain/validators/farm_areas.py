from __future__ import annotations

from agro_registry.domain.errors import ValidationError

FARM_AREAS_MESSAGE = "the sum of arable and vegetation area cannot exceed total area"


def validate_farm_areas(total_area: float, arable_area: float, vegetation_area: float) -> None:
    """Raise ``ValidationError`` unless the three areas form a valid farm.

    All areas must be non-negative and ``arable_area + vegetation_area`` may
    not exceed ``total_area``. The sum violation is reported on ``total_area``.
    """
    for field, value in (
        ("total_area", total_area),
        ("arable_area", arable_area),
        ("vegetation_area", vegetation_area),
    ):
        # NaN fails this comparison too
        if not value >= 0:
            raise ValidationError(field, f"{field} must be a non-negative number")

    if arable_area + vegetation_area > total_area:
        raise ValidationError("total_area", FARM_AREAS_MESSAGE)
