"""Parse command - normalize endpoints to NDJSON or text."""

import sys

import click

from ...addressing import EndpointParseError, parse_endpoint
from ...context import pass_context
from ...logger import get_logger
from ...models import EndpointRecord, Error


def _read_stdin_inputs():
    """Yield non-blank stdin lines without their line terminator."""
    for line in click.get_text_stream("stdin"):
        if line.strip():
            yield line.rstrip("\r\n")


@click.command()
@click.argument("inputs", nargs=-1)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["ndjson", "text"]),
    default="ndjson",
    show_default=True,
    help="Output format",
)
@click.option(
    "--fail-fast", is_flag=True, help="Stop at the first input that fails"
)
@pass_context
def parse(ctx, inputs, output_format, fail_fast):
    """Parse endpoints into address, version and port.

    Reads INPUTS from arguments, or one per line from stdin when none
    are given. Exits 1 if any input could not be parsed.

    Examples:
        ipnorm parse 10.0.0.1:80 "[::1]:8080"
        ipnorm parse -f text "tcp4:192.168.1.1:22"
        cat endpoints.txt | ipnorm parse --fail-fast

    Note:
        Inputs that start with '-' need '--' before them to stop
        option parsing.
    """
    log = get_logger(ctx.settings.log_level)
    ndjson = output_format == "ndjson"
    failed = False

    for raw in inputs or _read_stdin_inputs():
        try:
            endpoint = parse_endpoint(raw)
        except EndpointParseError as e:
            failed = True
            log.info("Rejected %r: %s", raw, e)
            error = Error(input=raw, message=str(e))
            if ndjson:
                click.echo(error.model_dump_json(by_alias=True))
            else:
                click.echo(f"error: {error}")
            if fail_fast:
                break
            continue

        log.debug("Parsed %r as %s", raw, endpoint)
        if ndjson:
            click.echo(EndpointRecord.from_endpoint(raw, endpoint).model_dump_json())
        else:
            click.echo(str(endpoint))

    if failed:
        sys.exit(1)
