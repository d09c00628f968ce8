"""Direct links from the legacy album and image payloads.

None of the fields of the payloads are guaranteed: the schema is not
documented and changes without notice. Anything missing or of an unexpected
type is treated as absent.

Album payload:

    {"data": {"images": [{"hash": ..., "ext": ..., "link": ...}]}}

Image payload:

    {"data": {"image": {"hash": ..., "ext": ..., "link": ..., "url": ...,
                        "links": {"original": ...}}}}
"""
import json

from addict import Dict as Addict

from .config import DIRECT_HOST
from .errors import (
    MalformedResponseError,
    NoExtractableLinksError,
    UnresolvableLinkError,
)


def build_direct_link(hash_, ext, fallback, direct_host=DIRECT_HOST):
    """Direct link from a hash and an extension, else from a fallback URL.

    Returns None if neither works. The fallback is only used if it looks like
    an absolute URL.
    """
    if hash_ and ext:
        if not ext.startswith("."):
            ext = "." + ext
        return f"{direct_host}/{hash_}{ext}"

    if fallback and fallback.startswith("http"):
        return fallback

    return None


def extract_album_links(text, direct_host=DIRECT_HOST):
    """List of direct links in the order of the album."""
    payload = parse_payload(text)
    images = _dict(payload.data).images
    if not isinstance(images, list):
        images = []

    links = []
    for image in images:
        if not isinstance(image, dict):
            continue
        link = build_direct_link(
            _str(image.hash), _str(image.ext), _str(image.link), direct_host
        )
        if link is not None:
            links.append(link)

    if not links:
        raise NoExtractableLinksError(f"Images: {len(images)}")

    return links


def extract_image_link(text, direct_host=DIRECT_HOST):
    """Direct link of a single image (links.original first, else built)."""
    payload = parse_payload(text)
    image = _dict(_dict(payload.data).image)

    # the original file when given is used as is, even if empty
    original = _str(_dict(image.links).original)
    if original is not None:
        if not original:
            raise UnresolvableLinkError("Image: empty links.original")
        return original

    fallback = _str(image.link)
    if fallback is None:
        fallback = _str(image.url)
    link = build_direct_link(_str(image.hash), _str(image.ext), fallback, direct_host)
    if link is None:
        raise UnresolvableLinkError(f"Image: {json.dumps(image.to_dict())}")

    return link


def parse_payload(text):
    try:
        payload = json.loads(text)
    except ValueError as ex:
        raise MalformedResponseError(f"Error: {ex}") from ex
    return _dict(payload)


def _dict(value):
    if isinstance(value, dict):
        return Addict(value)
    return Addict()


def _str(value):
    if isinstance(value, str):
        return value
    return None
