"""Core adapter records and byte-order helpers."""

from ecoshw.core.adapter import (
    MAX_ADAPTER_NAME_LEN,
    AdapterCollection,
    AdapterDescriptor,
    DiscoveryStatus,
)
from ecoshw.core.byteorder import host_to_network, network_to_host

__all__ = [
    "MAX_ADAPTER_NAME_LEN",
    "AdapterCollection",
    "AdapterDescriptor",
    "DiscoveryStatus",
    "host_to_network",
    "network_to_host",
]
