from dataclasses import fields
from typing import Any


class PatchDTO:
    """Mixin for update DTOs: a field left as ``None`` is absent from the patch."""

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if getattr(self, f.name) is not None
        }
