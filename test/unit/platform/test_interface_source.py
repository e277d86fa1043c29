"""Unit tests for PsutilInterfaceSource and InterfaceSnapshot."""

import socket
from types import SimpleNamespace

import pytest
from unittest.mock import patch

from ecoshw.exceptions import InterfaceQueryError
from ecoshw.platform.interfaces import (
    AF_LINK,
    InterfaceRecord,
    InterfaceSnapshot,
    PsutilInterfaceSource,
)


def addr(family, address):
    return SimpleNamespace(family=family, address=address, netmask=None)


@pytest.fixture
def psutil_data():
    """Interfaces as psutil reports them on a typical Linux host."""
    addrs = {
        "lo": [
            addr(socket.AF_INET, "127.0.0.1"),
            addr(AF_LINK, "00:00:00:00:00:00"),
        ],
        "eth0": [
            addr(socket.AF_INET, "192.168.1.10"),
            addr(socket.AF_INET6, "fe80::1%eth0"),
            addr(AF_LINK, "00:11:22:33:44:55"),
        ],
        "eth1": [addr(AF_LINK, "00:11:22:33:44:66")],
    }
    stats = {
        "lo": SimpleNamespace(isup=True, flags="up,loopback,running"),
        "eth0": SimpleNamespace(isup=True, flags="up,broadcast,running,multicast"),
        "eth1": SimpleNamespace(isup=False, flags="broadcast,multicast"),
    }
    with patch(
        "ecoshw.platform.interfaces.psutil.net_if_addrs", return_value=addrs
    ), patch("ecoshw.platform.interfaces.psutil.net_if_stats", return_value=stats):
        yield


class TestPsutilInterfaceSource:
    """Tests for building interface records from psutil."""

    def test_one_record_per_address(self, psutil_data):
        with PsutilInterfaceSource().query() as snapshot:
            records = list(snapshot)

        assert [r.name for r in records] == ["lo", "lo", "eth0", "eth0", "eth0", "eth1"]

    def test_flags_and_families(self, psutil_data):
        with PsutilInterfaceSource().query() as snapshot:
            records = list(snapshot)

        lo_link = records[1]
        assert lo_link.is_loopback is True
        assert lo_link.is_link_layer is True

        eth0_inet, eth0_link = records[2], records[4]
        assert eth0_inet.is_link_layer is False
        assert eth0_link.is_link_layer is True
        assert eth0_link.is_up is True
        assert eth0_link.is_loopback is False

        assert records[5].is_up is False

    def test_loopback_detected_from_address_without_flags(self):
        addrs = {"lo0": [addr(socket.AF_INET6, "::1"), addr(AF_LINK, "")]}
        stats = {"lo0": SimpleNamespace(isup=True)}
        with patch(
            "ecoshw.platform.interfaces.psutil.net_if_addrs", return_value=addrs
        ), patch("ecoshw.platform.interfaces.psutil.net_if_stats", return_value=stats):
            records = list(PsutilInterfaceSource().query())

        assert all(record.is_loopback for record in records)
        assert records[1].address is None

    def test_missing_stats_means_down(self):
        addrs = {"eth9": [addr(AF_LINK, "00:11:22:33:44:77")]}
        with patch(
            "ecoshw.platform.interfaces.psutil.net_if_addrs", return_value=addrs
        ), patch("ecoshw.platform.interfaces.psutil.net_if_stats", return_value={}):
            records = list(PsutilInterfaceSource().query())

        assert records[0].is_up is False

    def test_query_failure_raises_interface_query_error(self):
        with patch(
            "ecoshw.platform.interfaces.psutil.net_if_addrs",
            side_effect=OSError("permission denied"),
        ):
            with pytest.raises(InterfaceQueryError, match="permission denied"):
                PsutilInterfaceSource().query()


class TestInterfaceSnapshot:
    """Tests for snapshot release semantics."""

    @pytest.fixture
    def snapshot(self):
        return InterfaceSnapshot(
            [InterfaceRecord("eth0", AF_LINK, "00:11:22:33:44:55", True, False)]
        )

    def test_release_empties_snapshot(self, snapshot):
        snapshot.release()

        assert snapshot.released is True
        assert len(snapshot) == 0

    def test_release_twice_is_noop(self, snapshot):
        snapshot.release()
        snapshot.release()

        assert snapshot.released is True

    def test_context_manager_releases_on_exception(self, snapshot):
        with pytest.raises(KeyError):
            with snapshot:
                raise KeyError("eth0")

        assert snapshot.released is True
