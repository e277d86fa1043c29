import sys

import click
from dependency_injector import providers
from dependency_injector.wiring import inject, Provider
from loguru import logger
from rich.console import Console
from rich.table import Table

from ecoshw.container import Container
from ecoshw.core.adapter import AdapterCollection, DiscoveryStatus
from ecoshw.exceptions import DriverLoadError


@click.group()
def adapters():
    """Discover network adapters usable by the EtherCAT master."""
    pass


def display_adapters(console: Console, collection: AdapterCollection) -> None:
    """Display adapters in a table (CLI layer)."""
    table = Table(title="Network Adapters")
    table.add_column("#", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Description", style="yellow")

    for index, adapter in enumerate(collection):
        table.add_row(str(index), adapter.name, adapter.description)

    console.print(table)


def run_discovery(enumerator_provider: providers.Provider) -> AdapterCollection:
    """Build the configured enumerator and run it, exiting on driver errors."""
    try:
        enumerator = enumerator_provider()
    except DriverLoadError as e:
        logger.error(str(e))
        sys.exit(1)

    collection = enumerator.discover()

    if collection.status == DiscoveryStatus.QUERY_FAILED:
        logger.error("Could not read the OS interface list")
        sys.exit(1)
    if collection.status == DiscoveryStatus.PARTIAL:
        logger.warning("Adapter list is incomplete (out of memory during discovery)")

    return collection


@adapters.command("list")
@inject
def list_adapters(
    enumerator_provider: providers.Provider = Provider[Container.adapter_enumerator],
):
    """List discovered adapters in a table."""
    console = Console()

    with run_discovery(enumerator_provider) as collection:
        if not collection:
            console.print("[yellow]No adapters found.[/yellow]")
            console.print(
                "Check that the driver is installed and the program has "
                "sufficient privileges."
            )
            return
        display_adapters(console, collection)


@adapters.command()
@inject
def names(
    enumerator_provider: providers.Provider = Provider[Container.adapter_enumerator],
):
    """Print one adapter name per line."""
    with run_discovery(enumerator_provider) as collection:
        for name in collection.names:
            click.echo(name)
