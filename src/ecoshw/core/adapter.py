"""Adapter records shared by both enumerator backends."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum

# Size of the driver-facing name buffer, terminator included
MAX_ADAPTER_NAME_LEN = 128


def _bounded(text: str) -> str:
    return text[: MAX_ADAPTER_NAME_LEN - 1]


class DiscoveryStatus(StrEnum):
    """Outcome of a single discovery call."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    QUERY_FAILED = "query_failed"


@dataclass(frozen=True)
class AdapterDescriptor:
    """Represents one discoverable network adapter."""

    name: str
    description: str

    def __post_init__(self) -> None:
        """Truncate both strings to the adapter name bound."""
        if not self.name:
            raise ValueError("Adapter name must not be empty")
        object.__setattr__(self, "name", _bounded(self.name))
        object.__setattr__(self, "description", _bounded(self.description))


class AdapterCollection(Sequence):
    """Ordered, caller-owned sequence of adapter descriptors.

    Order is discovery order and duplicates are kept. The collection can be
    released explicitly or by leaving a ``with`` block; releasing drops every
    descriptor once and is a no-op when repeated.

    Example:
        with enumerator.discover() as adapters:
            for adapter in adapters:
                open_for_io(adapter.name)
        # adapters released
    """

    def __init__(
        self,
        adapters: Iterable[AdapterDescriptor] = (),
        status: DiscoveryStatus = DiscoveryStatus.COMPLETE,
    ):
        self._adapters: list[AdapterDescriptor] = list(adapters)
        self._status = status
        self._released = False

    @property
    def status(self) -> DiscoveryStatus:
        return self._status

    @property
    def released(self) -> bool:
        return self._released

    @property
    def names(self) -> list[str]:
        """Adapter names in discovery order."""
        return [adapter.name for adapter in self._adapters]

    def release(self) -> None:
        """Drop every descriptor. Safe on empty or already released collections."""
        self._adapters.clear()
        self._released = True

    def __getitem__(self, index):
        return self._adapters[index]

    def __len__(self) -> int:
        return len(self._adapters)

    def __iter__(self) -> Iterator[AdapterDescriptor]:
        return iter(self._adapters)

    def __enter__(self) -> "AdapterCollection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
        return False

    def __repr__(self) -> str:
        return f"AdapterCollection({self.names!r}, status={self._status.value!r})"
