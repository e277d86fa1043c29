"""Service layer for ecoshw.

This module contains the two adapter enumerator backends and the settings
that select between them.
"""

from ecoshw.services.capture_enumerator import SystemQueryEnumerator
from ecoshw.services.native_enumerator import NativeProbeEnumerator
from ecoshw.services.settings import OshwSettings

__all__ = [
    "NativeProbeEnumerator",
    "SystemQueryEnumerator",
    "OshwSettings",
]
