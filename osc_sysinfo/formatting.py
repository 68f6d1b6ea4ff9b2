"""Render a ``SystemSnapshot`` as chat-box text.

Each enabled section contributes one or two lines, always in the order
time, cpu, ram, gpu::

    10/18/2026 14:03:07 UTC+09
    CPU: 12.50%, Processes: 312
    RAM: 7.8 GiB (48.75%)
    GPU: 37% (85.12W, 61°C)
    3.2 GiB (40.00%)
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import StrEnum
from typing import Iterable

from osc_sysinfo.models.metrics import SystemSnapshot

PLACEHOLDER = "N/A"
TIME_FORMAT = "%m/%d/%Y %H:%M:%S"

_BYTE_PREFIXES = "KMGTPE"


class Section(StrEnum):
    TIME = "time"
    CPU = "cpu"
    RAM = "ram"
    GPU = "gpu"


def format_bytes(n: int) -> str:
    """Human readable size in binary units, e.g. ``1.5 KiB``."""
    if n < 1024:
        return f"{n} B"
    value = float(n)
    for prefix in _BYTE_PREFIXES:
        value /= 1024
        if value < 1024 or prefix == _BYTE_PREFIXES[-1]:
            break
    return f"{value:.1f} {prefix}iB"


def format_utc_offset(offset: timedelta | None) -> str:
    minutes = int((offset or timedelta(0)).total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    if minutes:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}"


class MessageFormatter:
    """Turns snapshots into the multi-line text sent over OSC."""

    def __init__(self, sections: Iterable[Section] = tuple(Section)) -> None:
        wanted = set(sections)
        # display order is fixed regardless of how sections were passed
        self.sections = [s for s in Section if s in wanted]

    def format(self, snapshot: SystemSnapshot) -> str:
        renderers = {
            Section.TIME: self._time,
            Section.CPU: self._cpu,
            Section.RAM: self._ram,
            Section.GPU: self._gpu,
        }
        return "\n".join(renderers[s](snapshot) for s in self.sections)

    # ── sections ────────────────────────────────────────

    @staticmethod
    def _time(snapshot: SystemSnapshot) -> str:
        ts: datetime = snapshot.timestamp
        return f"{ts.strftime(TIME_FORMAT)} UTC{format_utc_offset(ts.utcoffset())}"

    @staticmethod
    def _cpu(snapshot: SystemSnapshot) -> str:
        if snapshot.cpu_percent is None:
            return f"CPU: {PLACEHOLDER}"
        line = f"CPU: {snapshot.cpu_percent:.2f}%"
        if snapshot.process_count is not None:
            line += f", Processes: {snapshot.process_count}"
        return line

    @staticmethod
    def _ram(snapshot: SystemSnapshot) -> str:
        percent = snapshot.ram_percent
        if snapshot.ram_used is None or percent is None:
            return f"RAM: {PLACEHOLDER}"
        return f"RAM: {format_bytes(snapshot.ram_used)} ({percent:.2f}%)"

    @staticmethod
    def _gpu(snapshot: SystemSnapshot) -> str:
        if snapshot.gpu_percent is None:
            return f"GPU: {PLACEHOLDER}"

        details = []
        if snapshot.gpu_power_watts is not None:
            details.append(f"{snapshot.gpu_power_watts:.2f}W")
        if snapshot.gpu_temp_celsius is not None:
            details.append(f"{snapshot.gpu_temp_celsius:.0f}°C")

        line = f"GPU: {snapshot.gpu_percent:.0f}%"
        if details:
            line += f" ({', '.join(details)})"

        mem_percent = snapshot.gpu_mem_percent
        if snapshot.gpu_mem_used is not None and mem_percent is not None:
            line += f"\n{format_bytes(snapshot.gpu_mem_used)} ({mem_percent:.2f}%)"
        return line
