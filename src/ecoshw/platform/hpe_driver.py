"""INtime HPE driver binding (ctypes).

Only the open/close pair is bound: probing an interface means opening it with
``PROBE_ONLY`` and closing the handle straight away.
"""

import ctypes

from loguru import logger

from ecoshw.exceptions import AdapterProbeError, DriverLoadError

# hpeOpen configuration flags
SPEED_10 = 0x0001
SPEED_100 = 0x0002
SPEED_1000 = 0x0004
DUPLEX_HALF = 0x0010
DUPLEX_FULL = 0x0020
PROBE_ONLY = 0x0100

# hpeOpen interrupt modes
NO_INTERRUPT = 0
USE_INTERRUPT = 1

E_OK = 0

DEFAULT_PROBE_FLAGS = SPEED_1000 | DUPLEX_FULL | PROBE_ONLY


class HpeDriver:
    """Thin wrapper over ``hpeOpen``/``hpeClose`` of the HPE driver library."""

    def __init__(self, library: str = "hpeif2") -> None:
        try:
            self._lib = ctypes.CDLL(library)
        except OSError as e:
            raise DriverLoadError(
                f"Failed to load HPE driver library {library}: {e}"
            ) from e

        self._lib.hpeOpen.argtypes = [
            ctypes.c_char_p,
            ctypes.c_uint32,
            ctypes.c_uint32,
            ctypes.POINTER(ctypes.c_void_p),
        ]
        self._lib.hpeOpen.restype = ctypes.c_int
        self._lib.hpeClose.argtypes = [ctypes.c_void_p]
        self._lib.hpeClose.restype = ctypes.c_int
        logger.debug(f"Loaded HPE driver library: {library}")

    def open(self, name: str, flags: int, interrupt_mode: int) -> ctypes.c_void_p:
        """Open an HPE interface.

        Args:
            name: Interface name, e.g. "ie1g0"
            flags: Speed/duplex flags, optionally combined with PROBE_ONLY
            interrupt_mode: NO_INTERRUPT or USE_INTERRUPT

        Returns:
            Driver handle to pass to close()

        Raises:
            AdapterProbeError: If the driver returns a status other than E_OK
        """
        handle = ctypes.c_void_p()
        status = self._lib.hpeOpen(
            name.encode("ascii"), flags, interrupt_mode, ctypes.byref(handle)
        )
        if status != E_OK:
            raise AdapterProbeError(name, status)
        return handle

    def close(self, handle: ctypes.c_void_p) -> None:
        """Close a handle returned by open()."""
        status = self._lib.hpeClose(handle)
        if status != E_OK:
            logger.warning(f"hpeClose returned status {status}")
