from __future__ import annotations

from functools import lru_cache

from agro_registry.config import settings
from agro_registry.presentation.container import Services, build_services, build_store


@lru_cache(maxsize=1)
def get_services() -> Services:
    """One store per process; tests swap it through ``app.dependency_overrides``."""
    return build_services(build_store(settings))
