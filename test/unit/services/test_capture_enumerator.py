"""Unit tests for SystemQueryEnumerator."""

import socket

import pytest
from unittest.mock import patch

from ecoshw.core.adapter import AdapterDescriptor, DiscoveryStatus
from ecoshw.exceptions import InterfaceQueryError
from ecoshw.platform.interfaces import AF_LINK, InterfaceRecord, InterfaceSnapshot
from ecoshw.protocols import AdapterEnumeratorProtocol, InterfaceSourceProtocol
from ecoshw.services.capture_enumerator import SystemQueryEnumerator


def link(name, is_up=True, is_loopback=False, address="00:11:22:33:44:55"):
    return InterfaceRecord(
        name=name,
        family=AF_LINK,
        address=address,
        is_up=is_up,
        is_loopback=is_loopback,
    )


def inet(name, address="192.168.1.10"):
    return InterfaceRecord(
        name=name,
        family=socket.AF_INET,
        address=address,
        is_up=True,
        is_loopback=False,
    )


class CountingSnapshot(InterfaceSnapshot):
    def __init__(self, records):
        super().__init__(records)
        self.release_calls = 0

    def release(self):
        self.release_calls += 1
        super().release()


class FakeSource:
    """Interface source returning fixed records, or failing."""

    def __init__(self, records=(), fail=False):
        self.records = list(records)
        self.fail = fail
        self.snapshots = []

    def query(self):
        if self.fail:
            raise InterfaceQueryError("getifaddrs failed")
        snapshot = CountingSnapshot(list(self.records))
        self.snapshots.append(snapshot)
        return snapshot


class TestDiscover:
    """Tests for SystemQueryEnumerator.discover()."""

    def test_satisfies_protocols(self):
        source = FakeSource()

        assert isinstance(source, InterfaceSourceProtocol)
        assert isinstance(SystemQueryEnumerator(source), AdapterEnumeratorProtocol)

    def test_filters_loopback_virtual_and_ip_records(self):
        """Verify lo, ven0 and the IP record of eth0 are dropped."""
        source = FakeSource(
            [
                link("lo", is_loopback=True, address="00:00:00:00:00:00"),
                link("eth0"),
                link("ven0"),
                inet("eth0"),
            ]
        )

        collection = SystemQueryEnumerator(source).discover()

        assert collection.names == ["eth0"]
        assert collection[0].description == "eth0"
        assert collection.status == DiscoveryStatus.COMPLETE

    def test_one_descriptor_per_interface_with_many_families(self):
        source = FakeSource(
            [
                inet("eth0"),
                link("eth0"),
                InterfaceRecord("eth0", socket.AF_INET6, "fe80::1", True, False),
                link("eth1"),
                inet("eth1", "10.0.0.2"),
            ]
        )

        collection = SystemQueryEnumerator(source).discover()

        assert collection.names == ["eth0", "eth1"]

    def test_skips_down_interfaces(self):
        source = FakeSource([link("eth0", is_up=False), link("eth1")])

        assert SystemQueryEnumerator(source).discover().names == ["eth1"]

    def test_skips_records_without_address(self):
        source = FakeSource([link("eth0", address=None), link("eth1")])

        assert SystemQueryEnumerator(source).discover().names == ["eth1"]

    def test_skips_records_without_name(self):
        source = FakeSource([link(None), link("eth1")])

        collection = SystemQueryEnumerator(source).discover()

        assert collection.names == ["eth1"]

    def test_keeps_os_order(self):
        source = FakeSource([link("enp3s0"), link("eth0"), link("wlan0")])

        assert SystemQueryEnumerator(source).discover().names == [
            "enp3s0",
            "eth0",
            "wlan0",
        ]

    def test_custom_virtual_prefix(self):
        source = FakeSource([link("ven0"), link("veth12ab"), link("eth0")])

        collection = SystemQueryEnumerator(source, virtual_prefix="veth").discover()

        assert collection.names == ["ven0", "eth0"]

    def test_snapshot_released_once(self):
        source = FakeSource([link("eth0")])

        SystemQueryEnumerator(source).discover()

        assert source.snapshots[0].release_calls == 1
        assert source.snapshots[0].released is True

    def test_query_failure_returns_empty_collection(self):
        collection = SystemQueryEnumerator(FakeSource(fail=True)).discover()

        assert len(collection) == 0
        assert not collection
        assert collection.status == DiscoveryStatus.QUERY_FAILED

    def test_empty_interface_list_is_complete(self):
        source = FakeSource([])

        collection = SystemQueryEnumerator(source).discover()

        assert len(collection) == 0
        assert collection.status == DiscoveryStatus.COMPLETE
        assert source.snapshots[0].release_calls == 1


class TestAllocationFailure:
    """Tests for partial results when a descriptor cannot be created."""

    def test_partial_result_and_snapshot_released(self):
        source = FakeSource([link("eth0"), link("eth1"), link("eth2"), link("eth3")])
        calls = [0]

        def failing_descriptor(name, description):
            calls[0] += 1
            if calls[0] == 3:
                raise MemoryError()
            return AdapterDescriptor(name=name, description=description)

        with patch(
            "ecoshw.services.capture_enumerator.AdapterDescriptor",
            side_effect=failing_descriptor,
        ):
            collection = SystemQueryEnumerator(source).discover()

        assert collection.names == ["eth0", "eth1"]
        assert collection.status == DiscoveryStatus.PARTIAL
        assert source.snapshots[0].release_calls == 1


@pytest.mark.parametrize(
    "record, usable",
    [
        (link("eth0"), True),
        (link("lo", is_loopback=True), False),
        (link("ven1"), False),
        (inet("eth0"), False),
        (link("eth0", is_up=False), False),
    ],
)
def test_is_usable(record, usable):
    assert SystemQueryEnumerator(FakeSource()).is_usable(record) is usable
