from __future__ import annotations

import logging
from typing import Any

import gpustat
import pynvml

from osc_sysinfo.collectors.base import BaseCollector

logger = logging.getLogger(__name__)

MIB = 1024 * 1024

# gpustat json key -> (snapshot field, scale)
_FIELDS: dict[str, tuple[str, int]] = {
    "utilization.gpu": ("gpu_percent", 1),
    "temperature.gpu": ("gpu_temp_celsius", 1),
    "memory.used": ("gpu_mem_used", MIB),
    "memory.total": ("gpu_mem_total", MIB),
}


class GpuCollector(BaseCollector):
    """Reads utilization, power, temperature and memory of one NVIDIA GPU.

    Hosts without NVML (no NVIDIA driver, AMD/Intel graphics) produce no
    fields at all. The reason is logged once, not on every tick.

    NVML calls block for a few milliseconds; they run inline on the
    event loop, which has nothing else to do between ticks.
    """

    name = "gpu_collector"

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self._warned = False

    async def collect(self) -> dict[str, Any]:
        try:
            gpus = gpustat.new_query().jsonify()["gpus"]
        except Exception as exc:
            self._warn_once("GPU metrics unavailable: %s", exc)
            return {}

        if self.index >= len(gpus):
            self._warn_once(
                "GPU index %d out of range (%d device(s) found)", self.index, len(gpus)
            )
            return {}

        entry = gpus[self.index]
        fields: dict[str, Any] = {}
        for key, (field, scale) in _FIELDS.items():
            value = entry.get(key)
            # the driver reports unsupported readings as None
            if value is None:
                continue
            fields[field] = value * scale

        power = self._read_power_watts()
        if power is not None:
            fields["gpu_power_watts"] = power

        self._warned = False
        return fields

    def _read_power_watts(self) -> float | None:
        # gpustat truncates power.draw to whole watts
        try:
            pynvml.nvmlInit()
            try:
                handle = pynvml.nvmlDeviceGetHandleByIndex(self.index)
                return pynvml.nvmlDeviceGetPowerUsage(handle) / 1000
            finally:
                pynvml.nvmlShutdown()
        except pynvml.NVMLError as exc:
            logger.debug("GPU power unavailable: %s", exc)
            return None

    def _warn_once(self, msg: str, *args: Any) -> None:
        if self._warned:
            logger.debug(msg, *args)
            return
        logger.warning(msg, *args)
        self._warned = True
