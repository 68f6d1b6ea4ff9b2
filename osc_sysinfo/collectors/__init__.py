from .base import BaseCollector
from .cpu_collector import CpuCollector
from .gpu_collector import GpuCollector
from .ram_collector import RamCollector

__all__ = [
    "BaseCollector",
    "CpuCollector",
    "GpuCollector",
    "RamCollector",
]
