from dataclasses import dataclass
from pathlib import Path

from ecoshw.exceptions import BackendConfigurationError
from ecoshw.platform.hpe_driver import DEFAULT_PROBE_FLAGS
from ecoshw.services.capture_enumerator import SystemQueryEnumerator
from ecoshw.services.native_enumerator import NativeProbeEnumerator


@dataclass(frozen=True)
class OshwSettings:
    """Centralized configuration for adapter discovery.

    Holds the backend choice and the knobs of both enumerators, with a single
    source of truth for their defaults.
    """

    BACKENDS = ("native", "capture")
    DEFAULT_BACKEND = "capture"
    DEFAULT_DRIVER_LIBRARY = "hpeif2"
    DEFAULT_INSTANCES = NativeProbeEnumerator.DEFAULT_INSTANCES
    DEFAULT_LOG_DIR = Path("ecoshw-logs")

    backend: str = DEFAULT_BACKEND
    driver_library: str = DEFAULT_DRIVER_LIBRARY
    prefixes: tuple[str, ...] = NativeProbeEnumerator.DEFAULT_PREFIXES
    instances: int = DEFAULT_INSTANCES
    probe_flags: int = DEFAULT_PROBE_FLAGS
    virtual_prefix: str = SystemQueryEnumerator.DEFAULT_VIRTUAL_PREFIX
    debug: bool = False
    log_dir: Path = DEFAULT_LOG_DIR

    def __post_init__(self) -> None:
        if self.backend not in self.BACKENDS:
            raise BackendConfigurationError(
                f"Unknown backend {self.backend!r}, expected one of {', '.join(self.BACKENDS)}"
            )
        if self.instances < 0:
            raise BackendConfigurationError(
                f"Instance count must not be negative, got {self.instances}"
            )

    def get_log_file_path(self) -> Path | None:
        """Return path to log file if debug enabled, else None."""
        if self.debug:
            return self.log_dir / "ecoshw.log"
        return None

    def to_config(self) -> dict:
        """Values for the container's configuration provider."""
        return {
            "backend": self.backend,
            "driver_library": self.driver_library,
            "prefixes": self.prefixes,
            "instances": self.instances,
            "probe_flags": self.probe_flags,
            "virtual_prefix": self.virtual_prefix,
        }
