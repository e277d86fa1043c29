import click
from loguru import logger

from ecoshw.cli.adapters_cli import adapters
from ecoshw.cli.byteorder_cli import byteorder
from ecoshw.container import Container
from ecoshw.logging_config import add_logger_sink
from ecoshw.services.settings import OshwSettings


@click.group()
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    default=False,
    help="Log every probe and interface record, and write a log file.",
)
@click.option(
    "--backend",
    "-b",
    type=click.Choice(OshwSettings.BACKENDS),
    default=OshwSettings.DEFAULT_BACKEND,
    envvar="ECOSHW_BACKEND",
    show_default=True,
    help="Adapter discovery backend.",
)
@click.option(
    "--driver-library",
    default=OshwSettings.DEFAULT_DRIVER_LIBRARY,
    envvar="ECOSHW_DRIVER_LIBRARY",
    show_default=True,
    help="HPE driver library loaded by the native backend.",
)
@click.option(
    "--instances",
    type=click.IntRange(min=0),
    default=OshwSettings.DEFAULT_INSTANCES,
    show_default=True,
    help="Instances probed per interface prefix by the native backend.",
)
def ecoshw(debug: bool, backend: str, driver_library: str, instances: int):
    """EtherCAT OS hardware layer tools.

    Discovers network adapters either by probing HPE driver interfaces
    (native) or by filtering the OS interface list (capture).
    """
    settings = OshwSettings(
        backend=backend,
        driver_library=driver_library,
        instances=instances,
        debug=debug,
    )

    # Create and configure DI container
    container = Container()
    container.config.from_dict(settings.to_config())
    container.wire()

    ctx = click.get_current_context()
    ctx.obj = {
        "container": container,
        "settings": settings,
        "debug": debug,
    }

    logger.remove()

    def console_sink(msg):
        click.echo(msg, err=True, nl=False)

    add_logger_sink(debug, console_sink, colorize=True)

    log_file = settings.get_log_file_path()
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        add_logger_sink(debug, log_file, colorize=False, rotation="10 MB")
        logger.debug(f"Debug mode enabled. Logging to {log_file}")


ecoshw.add_command(adapters)
ecoshw.add_command(byteorder)
