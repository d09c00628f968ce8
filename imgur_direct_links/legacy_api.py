"""Access to the undocumented JSON endpoints of the Imgur web front end."""
import logging

import requests

from .errors import UnreachableError, error_for_status
from .url_utils import ALBUM

logger = logging.getLogger(__name__)

ALBUM_ENDPOINT = "{host}/ajaxalbums/getimages/{id}/hit.json?all=true"
IMAGE_ENDPOINT = "{host}/{id}.json"


def endpoint_url(identifier, kind, settings):
    """Legacy endpoint for an already sanitized album or image ID."""
    if kind == ALBUM:
        template = ALBUM_ENDPOINT
    else:
        template = IMAGE_ENDPOINT
    return template.format(host=settings.legacy_host, id=identifier)


def fetch_json_text(session: requests.Session, api_url, settings):
    """GET the endpoint and return the body as text (not parsed).

    Raises:
        UnreachableError: On connection error or timeout
        UpstreamError: On non-2xx status (NotFoundError for 404,
            ForbiddenError for 403)
    """
    logger.debug(f"GET {api_url}")
    try:
        resp = session.get(
            api_url, headers=settings.headers(), timeout=settings.timeout
        )
    except requests.RequestException as ex:
        raise UnreachableError(f"Error: {ex!r}") from ex

    if not 200 <= resp.status_code < 300:
        raise error_for_status(resp.status_code)

    return resp.text
