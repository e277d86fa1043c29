"""EtherCAT OS hardware layer: network adapter discovery and byte order."""

from ecoshw.core.adapter import AdapterCollection, AdapterDescriptor, DiscoveryStatus
from ecoshw.core.byteorder import host_to_network, network_to_host

__all__ = [
    "AdapterCollection",
    "AdapterDescriptor",
    "DiscoveryStatus",
    "host_to_network",
    "network_to_host",
]
