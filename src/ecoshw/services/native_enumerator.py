"""Adapter enumeration by probing HPE driver interface names."""

from loguru import logger

from ecoshw.core.adapter import AdapterCollection, AdapterDescriptor, DiscoveryStatus
from ecoshw.exceptions import AdapterProbeError
from ecoshw.platform.hpe_driver import DEFAULT_PROBE_FLAGS, NO_INTERRUPT
from ecoshw.protocols import HardwareDriverProtocol


class NativeProbeEnumerator:
    """Finds adapters by opening each candidate HPE interface in probe-only mode.

    Candidates are ``prefix + instance`` for every prefix in order and every
    instance from 0 to ``instances - 1``. A candidate that fails to open is
    absent and simply left out.
    """

    DEFAULT_PREFIXES: tuple[str, ...] = ("ie1g", "rtl1g", "rtl1gl")
    DEFAULT_INSTANCES: int = 4

    def __init__(
        self,
        driver: HardwareDriverProtocol,
        prefixes: tuple[str, ...] = DEFAULT_PREFIXES,
        instances: int = DEFAULT_INSTANCES,
        flags: int = DEFAULT_PROBE_FLAGS,
        interrupt_mode: int = NO_INTERRUPT,
    ) -> None:
        self._driver = driver
        self._prefixes = tuple(prefixes)
        self._instances = instances
        self._flags = flags
        self._interrupt_mode = interrupt_mode

    def candidate_names(self) -> list[str]:
        """Interface names to probe, prefix-major and instance-minor."""
        return [
            f"{prefix}{instance}"
            for prefix in self._prefixes
            for instance in range(self._instances)
        ]

    def probe(self, name: str) -> bool:
        """Probe one interface, closing the handle if the open succeeded.

        Returns:
            True if the interface exists, False otherwise
        """
        try:
            handle = self._driver.open(name, self._flags, self._interrupt_mode)
        except AdapterProbeError as e:
            logger.debug(f"{name} absent (status {e.status})")
            return False

        self._driver.close(handle)
        return True

    def discover(self) -> AdapterCollection:
        """Probe every candidate and collect the ones that respond.

        Returns:
            AdapterCollection in probing order. If a descriptor cannot be
            allocated, the adapters found so far are returned with status
            PARTIAL.
        """
        adapters: list[AdapterDescriptor] = []

        for name in self.candidate_names():
            if not self.probe(name):
                continue

            try:
                adapter = AdapterDescriptor(name=name, description=name)
            except MemoryError:
                logger.warning(
                    f"Out of memory while adding {name}, "
                    f"returning {len(adapters)} adapters found so far"
                )
                return AdapterCollection(adapters, DiscoveryStatus.PARTIAL)

            adapters.append(adapter)
            logger.debug(f"Found HPE adapter: {name}")

        logger.info(f"Native probe found {len(adapters)} adapters")
        return AdapterCollection(adapters)
