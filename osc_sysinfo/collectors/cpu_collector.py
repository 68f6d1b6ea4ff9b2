from __future__ import annotations

from typing import Any

import psutil

from osc_sysinfo.collectors.base import BaseCollector


class CpuCollector(BaseCollector):
    """Reads global CPU usage and the number of running processes.

    ``psutil.cpu_percent`` measures since its previous call, so the
    counter is primed once at construction.
    """

    name = "cpu_collector"

    def __init__(self) -> None:
        psutil.cpu_percent(interval=None)

    async def collect(self) -> dict[str, Any]:
        return {
            "cpu_percent": psutil.cpu_percent(interval=None),
            "process_count": len(psutil.pids()),
        }
