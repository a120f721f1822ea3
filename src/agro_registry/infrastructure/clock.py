"""Time source for record timestamps, swappable in tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Timezone-aware UTC wall clock used for ``created_at``/``updated_at``."""

    def now(self) -> datetime:
        return datetime.now(UTC)
