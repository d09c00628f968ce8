"""Link resolution commands."""
import logging

import click
import requests
import uvicorn

from .api import create_app
from .base import CatchAllExceptionsCommand, ResolveFailedError
from .errors import ResolveError
from .resolver import resolve_direct_links

logger = logging.getLogger(__name__)


@click.command("links", cls=CatchAllExceptionsCommand)
@click.argument("urls", nargs=-1)
@click.option(
    "--urls-file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="Text file containing Imgur URLs (one per line, # for comments)",
)
@click.option(
    "--output",
    type=click.Path(file_okay=True, dir_okay=False),
    help="Write the links to this file instead of stdout",
)
@click.pass_obj
def links(settings, urls, urls_file, output):
    """Print the direct links of Imgur albums and images.

    URLS are Imgur album or image URLs. The links of an album are printed one
    per line, in album order.
    """
    all_urls = list(urls)
    if urls_file:
        all_urls.extend(read_urls(urls_file))
    if not all_urls:
        raise click.UsageError("No URL to resolve")

    resolved = []
    failed = []
    with requests.Session() as session:
        for url in all_urls:
            try:
                resolved.append(
                    resolve_direct_links(url, settings=settings, session=session)
                )
            except ResolveError as ex:
                logger.error(f"{url}: {ex.message}")
                failed.append(url)

    text = "\n".join(resolved)
    if output:
        with open(output, "w") as f:
            if text:
                f.write(text + "\n")
        logger.info(f"Links written to {output}")
    elif text:
        click.echo(text)

    if failed:
        raise ResolveFailedError(
            f"{len(failed)} of {len(all_urls)} URLs could not be resolved"
        )


@click.command("serve", cls=CatchAllExceptionsCommand)
@click.option("--host", default="127.0.0.1", help="Interface to listen on")
@click.option("--port", default=8000, type=int, help="Port to listen on")
@click.pass_obj
def serve(settings, host, port):
    """Serve POST /links over HTTP."""
    uvicorn.run(create_app(settings), host=host, port=port)


def read_urls(filepath):
    """URLs of a text file, one per line. Blank lines and # comments are skipped."""
    with open(filepath, encoding="utf-8") as f:
        stripped = (line.strip() for line in f)
        return [url for url in stripped if url and not url.startswith("#")]
