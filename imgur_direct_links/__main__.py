import logging
import os
import sys

import click
import coloredlogs

from .config import (
    DEFAULT_SITE_URL,
    DEFAULT_TIMEOUT,
    SITE_URL_ENVVAR,
    TIMEOUT_ENVVAR,
    Settings,
)
from .link_commands import links, serve


def setup_logging(logger):
    if os.getenv("DEBUG") == "1":
        level = logging.DEBUG
    else:
        level = logging.INFO

    # stdout is for the links
    coloredlogs.install(
        level=level,
        logger=logger,
        isatty=True,
        fmt="%(asctime)s %(levelname)-8s %(message)s",
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group(context_settings={"show_default": True})
@click.version_option(package_name="imgur-direct-links")
@click.option(
    "--site-url",
    default=DEFAULT_SITE_URL,
    envvar=SITE_URL_ENVVAR,
    help="Site URL advertised in the User-Agent",
)
@click.option(
    "--timeout",
    default=DEFAULT_TIMEOUT,
    type=float,
    envvar=TIMEOUT_ENVVAR,
    help="Timeout of the requests to Imgur (seconds)",
)
@click.pass_context
def cli(ctx, site_url, timeout):
    logger = logging.getLogger(__package__)
    setup_logging(logger)
    ctx.obj = Settings(site_url=site_url, timeout=timeout)


cli.add_command(links)
cli.add_command(serve)

if __name__ == "__main__":
    try:
        cli()
    except click.exceptions.Abort:
        # Click raises this on Ctrl+C, and it prints "Aborted!".
        # We can pass to let the script exit cleanly.
        pass
