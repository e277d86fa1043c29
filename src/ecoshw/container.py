"""Dependency injection container for ecoshw services."""

from dependency_injector import containers, providers

from ecoshw.platform.hpe_driver import HpeDriver, NO_INTERRUPT
from ecoshw.platform.interfaces import PsutilInterfaceSource
from ecoshw.services.capture_enumerator import SystemQueryEnumerator
from ecoshw.services.native_enumerator import NativeProbeEnumerator


class Container(containers.DeclarativeContainer):
    """Application dependency injection container.

    The driver and interface source are Singletons; enumerators are Factories
    so every lookup gets a fresh one. ``adapter_enumerator`` picks the backend
    named by ``config.backend``, and only that backend's dependencies are built.
    """

    wiring_config = containers.WiringConfiguration(
        modules=[
            "ecoshw.cli.adapters_cli",
        ]
    )

    config = providers.Configuration()

    # External boundaries
    hpe_driver = providers.Singleton(
        HpeDriver,
        library=config.driver_library,
    )

    interface_source = providers.Singleton(
        PsutilInterfaceSource,
    )

    # Enumerator backends
    native_enumerator = providers.Factory(
        NativeProbeEnumerator,
        driver=hpe_driver,
        prefixes=config.prefixes,
        instances=config.instances,
        flags=config.probe_flags,
        interrupt_mode=NO_INTERRUPT,
    )

    capture_enumerator = providers.Factory(
        SystemQueryEnumerator,
        source=interface_source,
        virtual_prefix=config.virtual_prefix,
    )

    adapter_enumerator = providers.Selector(
        config.backend,
        native=native_enumerator,
        capture=capture_enumerator,
    )
