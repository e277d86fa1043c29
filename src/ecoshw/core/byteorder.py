"""16-bit host/network byte-order conversion.

EtherCAT datagrams are little endian, except for the Ethernet header which is
big endian as usual. These helpers cover the header fields.
"""

import socket

UINT16_MAX = 0xFFFF


def _check_uint16(value: int) -> None:
    if not 0 <= value <= UINT16_MAX:
        raise ValueError(f"Value {value} does not fit in 16 bits")


def host_to_network(host: int) -> int:
    """Convert a 16-bit value from host to network (big endian) byte order."""
    _check_uint16(host)
    return socket.htons(host)


def network_to_host(network: int) -> int:
    """Convert a 16-bit value from network (big endian) to host byte order."""
    _check_uint16(network)
    return socket.ntohs(network)
