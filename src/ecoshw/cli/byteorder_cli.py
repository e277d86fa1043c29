import click

from ecoshw.core.byteorder import UINT16_MAX, host_to_network, network_to_host


def parse_uint16(ctx, param, value: str) -> int:
    """Parse a decimal or 0x-prefixed hex value that fits in 16 bits."""
    try:
        number = int(value, 0)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not an integer")
    if not 0 <= number <= UINT16_MAX:
        raise click.BadParameter(f"{value} does not fit in 16 bits")
    return number


@click.group()
def byteorder():
    """Convert 16-bit values between host and network byte order."""
    pass


@byteorder.command()
@click.argument("value", callback=parse_uint16)
def htons(value: int):
    """Convert VALUE from host to network byte order."""
    click.echo(f"0x{host_to_network(value):04x}")


@byteorder.command()
@click.argument("value", callback=parse_uint16)
def ntohs(value: int):
    """Convert VALUE from network to host byte order."""
    click.echo(f"0x{network_to_host(value):04x}")
