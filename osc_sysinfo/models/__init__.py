from .metrics import SystemSnapshot

__all__ = [
    "SystemSnapshot",
]
