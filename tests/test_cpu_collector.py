from __future__ import annotations

from unittest.mock import patch

import pytest

from osc_sysinfo.collectors.cpu_collector import CpuCollector


def test_primes_cpu_counter_on_init():
    """The first cpu_percent() call happens at construction."""
    with patch("osc_sysinfo.collectors.cpu_collector.psutil") as mock_psutil:
        CpuCollector()
    mock_psutil.cpu_percent.assert_called_once_with(interval=None)


@pytest.mark.asyncio
async def test_reads_cpu_and_process_count():
    with patch("osc_sysinfo.collectors.cpu_collector.psutil") as mock_psutil:
        mock_psutil.cpu_percent.return_value = 25.0
        mock_psutil.pids.return_value = [1, 2, 3, 42]
        collector = CpuCollector()
        fields = await collector.collect()

    assert fields == {"cpu_percent": 25.0, "process_count": 4}


@pytest.mark.asyncio
async def test_reads_fresh_values_each_call():
    with patch("osc_sysinfo.collectors.cpu_collector.psutil") as mock_psutil:
        mock_psutil.pids.return_value = [1]
        collector = CpuCollector()

        mock_psutil.cpu_percent.return_value = 10.0
        first = await collector.collect()
        mock_psutil.cpu_percent.return_value = 90.0
        second = await collector.collect()

    assert first["cpu_percent"] == 10.0
    assert second["cpu_percent"] == 90.0


@pytest.mark.asyncio
async def test_real_psutil_reading():
    """Smoke test against the live host."""
    fields = await CpuCollector().collect()
    assert 0.0 <= fields["cpu_percent"] <= 100.0
    assert fields["process_count"] >= 1
