from __future__ import annotations

from typing import Any

import psutil

from osc_sysinfo.collectors.base import BaseCollector


class RamCollector(BaseCollector):
    """Reads physical memory usage in bytes."""

    name = "ram_collector"

    async def collect(self) -> dict[str, Any]:
        mem = psutil.virtual_memory()
        return {"ram_used": mem.used, "ram_total": mem.total}
