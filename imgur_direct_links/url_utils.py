from collections import namedtuple
import re
from urllib.parse import urlsplit

from .errors import InvalidIdentifierError

LinkInfo = namedtuple("LinkInfo", "id kind")

ALBUM = "album"
IMAGE = "image"

IMGUR_HOSTS = {"imgur.com", "www.imgur.com", "m.imgur.com"}
DIRECT_HOSTS = {"i.imgur.com"}

ALBUM_PREFIXES = {"a", "gallery"}

# top-level pages of imgur.com that are not images
RESERVED_PATHS = {
    "about",
    "account",
    "apps",
    "blog",
    "emerald",
    "hot",
    "new",
    "privacy",
    "r",
    "random",
    "register",
    "rules",
    "search",
    "signin",
    "t",
    "top",
    "topic",
    "tos",
    "upload",
    "user",
}

INVALID_ID_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def extract_link_info(value):
    """Classify an Imgur page URL as an album or an image.

    Supports URLs like:
    - https://imgur.com/a/AbC12
    - https://imgur.com/gallery/some-title-AbC12
    - https://imgur.com/XyZ987
    - https://i.imgur.com/XyZ987.jpg
    - imgur.com/a/AbC12

    The identifier is returned as found in the URL. It is not sanitized.

    Args:
        value: Imgur URL

    Returns:
        LinkInfo(id, kind) or None if the URL is not a recognized Imgur URL
    """
    value = value.strip()
    if not value:
        return None

    if "://" not in value:
        value = "https://" + value

    try:
        parts = urlsplit(value)
    except ValueError:
        # e.g. unbalanced brackets in the host
        return None
    if parts.scheme not in ("http", "https"):
        return None

    host = (parts.hostname or "").lower()
    segments = [s for s in parts.path.split("/") if s]
    if not segments:
        return None

    if host in DIRECT_HOSTS:
        if len(segments) != 1:
            return None
        return _link_info(_strip_extension(segments[0]), IMAGE)

    if host not in IMGUR_HOSTS:
        return None

    if segments[0] in ALBUM_PREFIXES:
        if len(segments) < 2:
            return None
        return _link_info(_strip_slug(segments[1]), ALBUM)

    if len(segments) != 1 or segments[0].lower() in RESERVED_PATHS:
        return None

    return _link_info(_strip_slug(_strip_extension(segments[0])), IMAGE)


def sanitize_identifier(identifier):
    """Check that an album/image ID only contains [a-zA-Z0-9_-].

    The ID ends up in the path of the legacy endpoint URL so nothing else is
    accepted.

    Raises:
        InvalidIdentifierError: If any character had to be removed
    """
    sanitized = INVALID_ID_CHARS.sub("", identifier)
    if not sanitized or sanitized != identifier:
        raise InvalidIdentifierError(
            f"Original: {identifier}, Sanitized: {sanitized}"
        )
    return sanitized


def _link_info(identifier, kind):
    if not identifier:
        return None
    return LinkInfo(identifier, kind)


def _strip_extension(segment):
    return segment.split(".", 1)[0]


def _strip_slug(segment):
    # new style URLs: /a/some-album-title-AbC12
    return segment.rsplit("-", 1)[-1]
