"""ipnorm CLI main entry point with global options."""

import click

from ..context import IpnormContext, resolve_settings


@click.group()
@click.option(
    "--log-level", help="Log level for stderr logging (overrides $IPNORM_LOG)"
)
@click.pass_context
def cli(ctx, log_level):
    """ipnorm - normalize loosely formatted IP endpoints."""
    ctx.ensure_object(IpnormContext)
    ctx.obj.settings = resolve_settings(log_level)


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check
from .commands.parse import parse

cli.add_command(parse)
cli.add_command(check)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
