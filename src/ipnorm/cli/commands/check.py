"""Check command - validate a single endpoint."""

import sys

import click

from ...addressing import EndpointParseError, parse_endpoint
from ...context import pass_context
from ...logger import get_logger


@click.command()
@click.argument("value")
@pass_context
def check(ctx, value):
    """Exit 0 if VALUE is a valid endpoint, 1 otherwise.

    Prints nothing on success, so it composes in shell conditions:

        ipnorm check "$ADDR" && echo ok
    """
    log = get_logger(ctx.settings.log_level)
    try:
        endpoint = parse_endpoint(value)
    except EndpointParseError as e:
        log.info("Rejected %r: %s", value, e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log.debug("Parsed %r as %s", value, endpoint)
