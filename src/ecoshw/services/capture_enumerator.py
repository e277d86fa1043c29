"""Adapter enumeration from the OS interface list."""

from loguru import logger

from ecoshw.core.adapter import AdapterCollection, AdapterDescriptor, DiscoveryStatus
from ecoshw.exceptions import InterfaceQueryError
from ecoshw.platform.interfaces import InterfaceRecord
from ecoshw.protocols import InterfaceSourceProtocol


class SystemQueryEnumerator:
    """Finds adapters by filtering the OS interface list.

    An entry is kept when the interface is up and has an address, is not
    loopback, the address is a link-layer one, and the name does not start with
    the virtual adapter prefix. Link-layer only means one entry per physical
    interface even when it also carries IPv4/IPv6 addresses.
    """

    DEFAULT_VIRTUAL_PREFIX: str = "ven"

    def __init__(
        self,
        source: InterfaceSourceProtocol,
        virtual_prefix: str = DEFAULT_VIRTUAL_PREFIX,
    ) -> None:
        self._source = source
        self._virtual_prefix = virtual_prefix

    def is_usable(self, record: InterfaceRecord) -> bool:
        """Check whether an interface record describes a usable adapter."""
        if not record.is_up or record.address is None:
            return False
        if record.is_loopback:
            return False
        if not record.is_link_layer:
            return False
        if (
            record.name
            and self._virtual_prefix
            and record.name.startswith(self._virtual_prefix)
        ):
            return False
        return True

    def discover(self) -> AdapterCollection:
        """Query the OS and collect usable adapters in OS order.

        Returns:
            AdapterCollection of usable adapters. Empty with status
            QUERY_FAILED if the interface list could not be read; status
            PARTIAL if a descriptor could not be allocated.
        """
        try:
            snapshot = self._source.query()
        except InterfaceQueryError as e:
            logger.error(str(e))
            return AdapterCollection(status=DiscoveryStatus.QUERY_FAILED)

        adapters: list[AdapterDescriptor] = []
        with snapshot:
            for record in snapshot:
                if not self.is_usable(record):
                    continue

                if not record.name:
                    # A nameless descriptor cannot be handed to the adapter-open module
                    logger.debug("Skipping usable interface without a name")
                    continue

                try:
                    adapter = AdapterDescriptor(
                        name=record.name, description=record.name
                    )
                except MemoryError:
                    logger.warning(
                        f"Out of memory while adding {record.name}, "
                        f"returning {len(adapters)} adapters found so far"
                    )
                    return AdapterCollection(adapters, DiscoveryStatus.PARTIAL)

                adapters.append(adapter)
                logger.debug(f"Found interface: {record.name}")

        logger.info(f"Interface query found {len(adapters)} adapters")
        return AdapterCollection(adapters)
