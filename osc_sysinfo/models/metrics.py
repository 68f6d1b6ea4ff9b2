from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


def _percent(used: int | None, total: int | None) -> float | None:
    if used is None or not total:
        return None
    return used / total * 100.0


class SystemSnapshot(BaseModel):
    """Point-in-time snapshot of local system load.

    Any reading may be ``None`` when the host cannot provide it.
    """

    timestamp: datetime = Field(default_factory=lambda: datetime.now().astimezone())

    cpu_percent: float | None = None
    process_count: int | None = None

    ram_used: int | None = None
    ram_total: int | None = None

    gpu_percent: float | None = None
    gpu_power_watts: float | None = None
    gpu_temp_celsius: float | None = None
    gpu_mem_used: int | None = None
    gpu_mem_total: int | None = None

    @property
    def ram_percent(self) -> float | None:
        return _percent(self.ram_used, self.ram_total)

    @property
    def gpu_mem_percent(self) -> float | None:
        return _percent(self.gpu_mem_used, self.gpu_mem_total)
