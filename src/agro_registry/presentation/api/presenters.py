"""Turn domain records and read models into JSON-ready dicts."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from agro_registry.application.dtos.views import (
    CropView,
    FarmBranch,
    FarmView,
    HarvestBranch,
    HarvestView,
    ProducerView,
)


def record(entity: Any | None) -> dict[str, Any] | None:
    return asdict(entity) if entity is not None else None


def harvest_branch(branch: HarvestBranch) -> dict[str, Any]:
    return {**asdict(branch.harvest), "crops": [asdict(c) for c in branch.crops]}


def farm_branch(branch: FarmBranch) -> dict[str, Any]:
    return {**asdict(branch.farm), "harvests": [harvest_branch(h) for h in branch.harvests]}


def producer_view(view: ProducerView) -> dict[str, Any]:
    return {**asdict(view.producer), "farms": [farm_branch(f) for f in view.farms]}


def farm_view(view: FarmView) -> dict[str, Any]:
    return {
        **asdict(view.farm),
        "producer": record(view.producer),
        "harvests": [harvest_branch(h) for h in view.harvests],
    }


def harvest_view(view: HarvestView) -> dict[str, Any]:
    farm = {**asdict(view.farm), "producer": record(view.producer)} if view.farm else None
    return {**asdict(view.harvest), "farm": farm, "crops": [asdict(c) for c in view.crops]}


def crop_view(view: CropView) -> dict[str, Any]:
    harvest = {**asdict(view.harvest), "farm": record(view.farm)} if view.harvest else None
    return {**asdict(view.crop), "harvest": harvest}
