"""Custom exception classes for ecoshw.

This module defines the exceptions raised at the driver and OS boundaries.
Enumerators catch them and turn them into omissions or an empty result, so
only configuration errors ever reach a caller of ``discover()``.
"""


class OshwError(Exception):
    """Base exception class for all ecoshw errors."""

    pass


class AdapterProbeError(OshwError):
    """Raised when a probe-only open of a hardware interface fails."""

    def __init__(self, name: str, status: int):
        super().__init__(f"Probe of {name} failed with driver status {status}")
        self.name = name
        self.status = status


class InterfaceQueryError(OshwError):
    """Raised when the OS interface list cannot be obtained."""

    pass


class DriverLoadError(OshwError):
    """Raised when the hardware driver library cannot be loaded."""

    pass


class BackendConfigurationError(OshwError):
    """Raised when an unknown enumerator backend is configured."""

    pass
