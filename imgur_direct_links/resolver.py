import logging

import requests

from .config import Settings
from .direct_links import extract_album_links, extract_image_link
from .errors import InvalidUrlError, ResolveError
from .legacy_api import endpoint_url, fetch_json_text
from .url_utils import ALBUM, IMAGE, extract_link_info, sanitize_identifier

logger = logging.getLogger(__name__)


def resolve_direct_links(url, settings=None, session=None):
    """Direct links for an Imgur album or image URL.

    Returns the direct link of an image, or the direct links of all the images
    of an album joined with newlines.

    Raises:
        ResolveError: One of its subclasses depending on the failure
    """
    if settings is None:
        settings = Settings.from_env()

    if session is None:
        with requests.Session() as session:
            return _resolve(url, settings, session)
    return _resolve(url, settings, session)


def _resolve(url, settings, session):
    api_url = None
    try:
        link_info = extract_link_info(url)
        if link_info is None:
            raise InvalidUrlError()

        identifier = sanitize_identifier(link_info.id)
        # anything not an album is queried as an image
        kind = ALBUM if link_info.kind == ALBUM else IMAGE

        api_url = endpoint_url(identifier, kind, settings)
        text = fetch_json_text(session, api_url, settings)

        if kind == ALBUM:
            links = extract_album_links(text, settings.direct_host)
            logger.debug(f"{len(links)} links found in album {identifier}")
            return "\n".join(links)

        link = extract_image_link(text, settings.direct_host)
        logger.debug(f"Link found for image {identifier}")
        return link
    except ResolveError as ex:
        _log_failure(url, api_url, ex)
        raise


def _log_failure(url, api_url, ex):
    logger.error(f"URL: {url}")
    msg = f"[{ex.kind.name}] {ex.message}"
    if api_url:
        msg += f" - API URL: {api_url}"
    if ex.detail:
        msg += f", {ex.detail}"
    logger.error(msg)
