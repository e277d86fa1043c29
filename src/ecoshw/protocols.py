"""Protocol definitions for dependency injection.

This module defines the protocol interfaces at the seams of ecoshw: the
enumerator contract shared by both backends, and the two external boundaries
(hardware driver and OS interface list) the backends talk to.

All protocols are marked @runtime_checkable to support isinstance() validation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ecoshw.core.adapter import AdapterCollection
    from ecoshw.platform.interfaces import InterfaceSnapshot


@runtime_checkable
class AdapterEnumeratorProtocol(Protocol):
    """Protocol for network adapter discovery backends."""

    def discover(self) -> AdapterCollection:
        """Enumerate usable network adapters.

        Returns:
            Ordered AdapterCollection owned by the caller. Empty when nothing
            was found or the underlying query failed.
        """
        ...


@runtime_checkable
class HardwareDriverProtocol(Protocol):
    """Protocol for the real-time OS network driver."""

    def open(self, name: str, flags: int, interrupt_mode: int) -> Any:
        """Open an interface by name.

        Args:
            name: Synthesized interface name
            flags: Configuration flags (speed, duplex, probe-only)
            interrupt_mode: Interrupt delivery mode

        Returns:
            Driver handle

        Raises:
            AdapterProbeError: If the interface cannot be opened
        """
        ...

    def close(self, handle: Any) -> None:
        """Close a handle returned by open()."""
        ...


@runtime_checkable
class InterfaceSourceProtocol(Protocol):
    """Protocol for the OS interface list."""

    def query(self) -> InterfaceSnapshot:
        """Take a snapshot of the current interface list.

        Raises:
            InterfaceQueryError: If the list cannot be obtained
        """
        ...
