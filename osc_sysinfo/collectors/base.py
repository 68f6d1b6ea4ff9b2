from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseCollector(ABC):
    """Abstract base for all system collectors.

    Subclasses implement ``collect()`` which returns a mapping of
    ``SystemSnapshot`` field names to readings. Fields the host cannot
    provide are simply left out.
    """

    name: str = "base"

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    async def collect(self) -> dict[str, Any]:
        """Read the current values and return snapshot fields."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
