"""Platform boundaries: HPE driver binding and OS interface list."""

from ecoshw.platform.hpe_driver import HpeDriver
from ecoshw.platform.interfaces import (
    InterfaceRecord,
    InterfaceSnapshot,
    PsutilInterfaceSource,
)

__all__ = [
    "HpeDriver",
    "InterfaceRecord",
    "InterfaceSnapshot",
    "PsutilInterfaceSource",
]
