from __future__ import annotations

import logging
from typing import Any, Iterable

from osc_sysinfo.collectors import (
    BaseCollector,
    CpuCollector,
    GpuCollector,
    RamCollector,
)
from osc_sysinfo.config import Settings
from osc_sysinfo.models.metrics import SystemSnapshot

logger = logging.getLogger(__name__)


class MetricsSampler:
    """Runs every collector once and merges the readings into a snapshot."""

    def __init__(self, collectors: Iterable[BaseCollector]) -> None:
        self._collectors = list(collectors)

    async def sample(self) -> SystemSnapshot:
        fields: dict[str, Any] = {}
        for collector in self._collectors:
            try:
                fields.update(await collector.collect())
            except Exception:
                logger.exception("Collector [%s] error during collect()", collector.name)
        return SystemSnapshot(**fields)

    @property
    def collectors(self) -> list[BaseCollector]:
        return list(self._collectors)


def create_sampler(settings: Settings) -> MetricsSampler:
    """Build a sampler holding only the collectors for enabled sections."""
    collectors: list[BaseCollector] = []
    if settings.show_cpu:
        collectors.append(CpuCollector())
    if settings.show_ram:
        collectors.append(RamCollector())
    if settings.show_gpu:
        collectors.append(GpuCollector(index=settings.gpu_index))
    return MetricsSampler(collectors)
