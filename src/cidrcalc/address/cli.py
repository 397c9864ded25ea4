"""
Address translation CLI command.
"""

import json

import click
from rich.console import Console
from rich.table import Table

from cidrcalc import __version__
from cidrcalc.address.core import TranslationError, Translation, explain
from cidrcalc.config import ConfigError, load_config
from cidrcalc.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def _print_breakdown(console: Console, result: Translation) -> None:
    table = Table(title=f"Fields: {result.mask}", box=None)
    table.add_column("#", style="dim")
    table.add_column("Width", style="cyan", justify="right")
    table.add_column("Value", style="white", justify="right")
    table.add_column("Bits", style="green")
    table.add_column("Offset", style="dim", justify="right")

    for f in result.fields():
        table.add_row(str(f.index), str(f.width), str(f.value), f.bits, str(f.offset))

    console.print(table)

    octets = Table(show_header=False, box=None)
    octets.add_column("Property", style="cyan")
    octets.add_column("Value", style="white")
    octets.add_row("Packed", ".".join(str(o) for o in result.netmask_octets))
    octets.add_row("Within", ".".join(str(o) for o in result.within_octets))
    octets.add_row("Result", f"[bold]{result.address}[/bold]")
    console.print(octets)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("value", nargs=-1)
@click.option("--mask", "-m", default=None, help="bitmask for translation [default: 8:13:4:7]")
@click.option("--within", "-w", default=None, help="result is OR'ed with this CIDR [default: 0.0.0.0]")
@click.option("--config", "config_file", default=None, metavar="PATH",
              help="config file (default is $HOME/.cidr)")
@click.option("--explain", "-x", "show_fields", is_flag=True, help="Show how each field is packed")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
@click.option("--log-file", default=None, metavar="PATH",
              help="Also write a debug log to this file")
@click.version_option(__version__, prog_name="cidr")
@click.pass_context
def cidr(
    ctx: click.Context,
    value: tuple[str, ...],
    mask: str | None,
    within: str | None,
    config_file: str | None,
    show_fields: bool,
    as_json: bool,
    debug: bool,
    log_file: str | None,
):
    """Return a network address given a mask and a value.

    Calculate a network 'address' given a mask and a value. This is useful
    when dealing with the 172.16.0.0/12 CIDR or when subnets don't align
    with octet boundaries.

    \b
    Examples:
        cidr --mask 12.8.6.6 --within 172.16.0.0 0.1.1.1
        returns 172.16.16.65

    \b
    Any single non-digit character separates fields:
        cidr -m 8:13:4:7 1:2:3:4
    """
    configure_logging(debug=debug, log_file=log_file)
    console = Console(highlight=False)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        click.echo(f"Error: {e}")
        raise SystemExit(1)

    if len(value) != 1:
        click.echo(ctx.get_usage())
        return

    # An explicit empty flag is passed on and rejected by the parser
    if mask is None:
        mask = config.mask
    if within is None:
        within = config.within
    logger.debug("mask=%s within=%s value=%s", mask, within, value[0])

    try:
        result = explain(value[0], mask=mask, within=within)
    except TranslationError as e:
        logger.debug("Translation failed: %s", e)
        click.echo(f"Error: {e}")
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif show_fields:
        _print_breakdown(console, result)
    else:
        click.echo(result.address)


def main():
    """Entry point for the cidr command."""
    cidr(prog_name="cidr")
