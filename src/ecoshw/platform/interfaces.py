"""OS interface list backed by psutil.

psutil reports addresses per interface name; each (interface, address) pair
becomes one ``InterfaceRecord`` so that an interface carrying link, IPv4 and
IPv6 addresses shows up once per address family, like ``getifaddrs`` entries.
"""

import ipaddress
import socket
from dataclasses import dataclass

import psutil
from loguru import logger

from ecoshw.exceptions import InterfaceQueryError

AF_LINK = psutil.AF_LINK


@dataclass(frozen=True)
class InterfaceRecord:
    """One address entry of an OS network interface."""

    name: str | None
    family: int
    address: str | None
    is_up: bool
    is_loopback: bool

    @property
    def is_link_layer(self) -> bool:
        return self.family == AF_LINK


class InterfaceSnapshot:
    """Interface records returned by one OS query.

    Must be released once after use; ``with`` does it on every exit path.
    """

    def __init__(self, records: list[InterfaceRecord]):
        self._records = records
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._records = []
        self._released = True
        logger.debug("Released interface snapshot")

    def __iter__(self):
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __enter__(self) -> "InterfaceSnapshot":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
        return False


def _is_loopback_address(family: int, address: str | None) -> bool:
    if family not in (socket.AF_INET, socket.AF_INET6) or not address:
        return False
    try:
        # Strip IPv6 zone index, e.g. "fe80::1%eth0"
        return ipaddress.ip_address(address.split("%")[0]).is_loopback
    except ValueError:
        return False


class PsutilInterfaceSource:
    """Builds interface snapshots from ``psutil.net_if_addrs``/``net_if_stats``."""

    def query(self) -> InterfaceSnapshot:
        """Take a snapshot of the current interface list.

        Raises:
            InterfaceQueryError: If psutil cannot read the interface list
        """
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except (OSError, psutil.Error) as e:
            raise InterfaceQueryError(f"Failed to query network interfaces: {e}") from e

        records: list[InterfaceRecord] = []
        for name, addresses in addrs.items():
            stat = stats.get(name)
            is_up = bool(stat and stat.isup)
            flags = getattr(stat, "flags", "") if stat else ""
            is_loopback = "loopback" in flags.split(",") or any(
                _is_loopback_address(addr.family, addr.address) for addr in addresses
            )
            for addr in addresses:
                records.append(
                    InterfaceRecord(
                        name=name or None,
                        family=addr.family,
                        address=addr.address or None,
                        is_up=is_up,
                        is_loopback=is_loopback,
                    )
                )

        logger.debug(f"Interface query returned {len(records)} address records")
        return InterfaceSnapshot(records)
