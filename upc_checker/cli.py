"""Command-line interface for UPC Checker."""

import logging

import click

from upc_checker import app_config, get_version, log_message
from upc_checker.checksum.validator import check_upc

logger = logging.getLogger(__name__)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=get_version(), prog_name="UPC Checker")
@click.argument("upc", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--log",
    type=click.Choice(["none", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Override the configured log level for this run",
)
def main(upc: tuple[str, ...], log: str | None) -> None:
    """Check a 12-digit UPC-A code and print true or false.

    Whitespace inside UPC is ignored. Without UPC the built-in default
    code is checked.
    """
    if log is not None:
        if log.upper() == "NONE":
            logging.getLogger().setLevel(logging.CRITICAL)
        else:
            logging.getLogger().setLevel(getattr(logging, log.upper()))

    # Unquoted fragments such as `6 3938200039 3` arrive as separate arguments.
    raw = "".join(upc)
    source = "argv" if raw else "default"

    result = check_upc(raw, default=app_config.DEFAULT_UPC)
    if result.ok:
        logger.info(log_message(f"{result.value} is a valid UPC-A", source))
    else:
        logger.info(log_message(f"{result.outcome.value}: {result.error}", source))

    click.echo("true" if result.ok else "false")


if __name__ == "__main__":
    main()
