from __future__ import annotations

import logging
from typing import Any
from unittest.mock import patch

import pytest

from osc_sysinfo.collectors import CpuCollector, GpuCollector, RamCollector
from osc_sysinfo.collectors.base import BaseCollector
from osc_sysinfo.config import Settings
from osc_sysinfo.models.metrics import SystemSnapshot
from osc_sysinfo.sampler import MetricsSampler, create_sampler


class StubCollector(BaseCollector):
    """Collector that returns fixed fields each call."""

    name = "stub"

    def __init__(self, fields: dict[str, Any]) -> None:
        self.fields = fields
        self.collect_count = 0

    async def collect(self) -> dict[str, Any]:
        self.collect_count += 1
        return dict(self.fields)


class ErrorCollector(BaseCollector):
    """Collector that raises on every collect call."""

    name = "error"

    async def collect(self) -> dict[str, Any]:
        raise RuntimeError("collect failed")


@pytest.mark.asyncio
async def test_merges_collector_fields():
    sampler = MetricsSampler([
        StubCollector({"cpu_percent": 42.0, "process_count": 7}),
        StubCollector({"ram_used": 1, "ram_total": 2}),
    ])
    snap = await sampler.sample()

    assert isinstance(snap, SystemSnapshot)
    assert snap.cpu_percent == 42.0
    assert snap.process_count == 7
    assert snap.ram_percent == 50.0
    assert snap.gpu_percent is None


@pytest.mark.asyncio
async def test_fresh_snapshot_each_call():
    stub = StubCollector({"cpu_percent": 1.0})
    sampler = MetricsSampler([stub])

    first = await sampler.sample()
    second = await sampler.sample()

    assert first is not second
    assert stub.collect_count == 2


@pytest.mark.asyncio
async def test_failing_collector_is_not_fatal(caplog):
    sampler = MetricsSampler([
        ErrorCollector(),
        StubCollector({"cpu_percent": 10.0}),
    ])
    with caplog.at_level(logging.ERROR):
        snap = await sampler.sample()

    assert snap.cpu_percent == 10.0
    assert "Collector [error]" in caplog.text


@pytest.mark.asyncio
async def test_no_collectors():
    snap = await MetricsSampler([]).sample()
    assert snap.cpu_percent is None
    assert snap.timestamp is not None


# ── create_sampler ──────────────────────────────────────


def test_create_sampler_all_sections():
    with patch("osc_sysinfo.collectors.cpu_collector.psutil"):
        sampler = create_sampler(Settings())
    kinds = [type(c) for c in sampler.collectors]
    assert kinds == [CpuCollector, RamCollector, GpuCollector]


def test_create_sampler_skips_disabled():
    sampler = create_sampler(Settings(show_cpu=False, show_gpu=False))
    assert [type(c) for c in sampler.collectors] == [RamCollector]


def test_create_sampler_passes_gpu_index():
    sampler = create_sampler(Settings(show_cpu=False, show_ram=False, gpu_index=2))
    (gpu,) = sampler.collectors
    assert isinstance(gpu, GpuCollector)
    assert gpu.index == 2


def test_time_only_needs_no_collectors():
    sampler = create_sampler(
        Settings(show_cpu=False, show_ram=False, show_gpu=False)
    )
    assert sampler.collectors == []
