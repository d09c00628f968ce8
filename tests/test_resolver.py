import logging

import pytest
import requests
import responses

from imgur_direct_links.errors import (
    ErrorCategory,
    ErrorKind,
    InvalidIdentifierError,
    InvalidUrlError,
    MalformedResponseError,
    ResolveError,
)
from imgur_direct_links.resolver import resolve_direct_links

ALBUM_API_URL = "https://imgur.com/ajaxalbums/getimages/AbC12/hit.json?all=true"
IMAGE_API_URL = "https://imgur.com/XyZ987q.json"


@responses.activate
def test_resolve_album(settings, album_payload):
    responses.add(responses.GET, ALBUM_API_URL, json=album_payload, status=200)

    links = resolve_direct_links("https://imgur.com/a/AbC12", settings=settings)

    assert links == (
        "https://i.imgur.com/a1B2c3D.jpg\n"
        "https://i.imgur.com/e4F5g6H.png\n"
        "https://i.imgur.com/i7J8k9L.gif"
    )
    assert len(responses.calls) == 1
    assert responses.calls[0].request.url == ALBUM_API_URL


@responses.activate
def test_resolve_image(settings, image_payload):
    responses.add(responses.GET, IMAGE_API_URL, json=image_payload, status=200)

    link = resolve_direct_links("https://i.imgur.com/XyZ987q.jpg", settings=settings)

    assert link == "https://i.imgur.com/XyZ987q.png"


@responses.activate
def test_resolve_with_given_session(settings, image_payload):
    responses.add(responses.GET, IMAGE_API_URL, json=image_payload, status=200)

    with requests.Session() as session:
        link = resolve_direct_links(
            "https://imgur.com/XyZ987q", settings=settings, session=session
        )

    assert link == "https://i.imgur.com/XyZ987q.png"


@responses.activate
def test_resolve_settings_from_env(monkeypatch, image_payload):
    monkeypatch.setenv("IMGUR_DIRECT_LINKS_SITE_URL", "https://env.example.org")
    responses.add(responses.GET, IMAGE_API_URL, json=image_payload, status=200)

    resolve_direct_links("https://imgur.com/XyZ987q")

    user_agent = responses.calls[0].request.headers["User-Agent"]
    assert user_agent == "ImgurDirectLinksBot/1.0 (+https://env.example.org)"


@pytest.mark.parametrize(
    "url", ["https://example.com/a/AbC12", "https://[imgur.com/a/AbC12"]
)
@responses.activate
def test_resolve_invalid_url(settings, url):
    with pytest.raises(InvalidUrlError) as exc_info:
        resolve_direct_links(url, settings=settings)

    assert exc_info.value.category == ErrorCategory.BAD_REQUEST
    assert str(exc_info.value) == "Invalid URL format"
    assert len(responses.calls) == 0


@pytest.mark.parametrize(
    "url",
    [
        "https://imgur.com/a/AbC%2F12",
        "https://imgur.com/a/AbC12..",
        "https://imgur.com/gallery/Ab$C12",
    ],
)
@responses.activate
def test_resolve_invalid_identifier_before_fetch(settings, url):
    # any request would fail with a ConnectionError since nothing is registered
    with pytest.raises(InvalidIdentifierError) as exc_info:
        resolve_direct_links(url, settings=settings)

    assert exc_info.value.kind == ErrorKind.INVALID_IDENTIFIER
    assert exc_info.value.category == ErrorCategory.BAD_REQUEST
    assert len(responses.calls) == 0


@pytest.mark.parametrize(
    "status,message",
    [
        (404, "Album or image not found. Please check the URL."),
        (403, "Access forbidden. The album may be private or deleted."),
        (500, "Failed to fetch image data"),
    ],
)
@responses.activate
def test_resolve_status_messages(settings, status, message):
    responses.add(responses.GET, ALBUM_API_URL, body="nope", status=status)

    with pytest.raises(ResolveError) as exc_info:
        resolve_direct_links("https://imgur.com/a/AbC12", settings=settings)

    assert exc_info.value.message == message
    assert exc_info.value.category == ErrorCategory.INTERNAL


@pytest.mark.parametrize(
    "url,api_url",
    [
        ("https://imgur.com/a/AbC12", ALBUM_API_URL),
        ("https://imgur.com/XyZ987q", IMAGE_API_URL),
    ],
)
@responses.activate
def test_resolve_malformed_response(settings, url, api_url):
    responses.add(responses.GET, api_url, body="<html>oops</html>", status=200)

    with pytest.raises(MalformedResponseError):
        resolve_direct_links(url, settings=settings)


@responses.activate
def test_resolve_failure_is_logged(settings, caplog):
    responses.add(responses.GET, ALBUM_API_URL, body="nope", status=404)

    with caplog.at_level(logging.ERROR, logger="imgur_direct_links"):
        with pytest.raises(ResolveError) as exc_info:
            resolve_direct_links("https://imgur.com/a/AbC12", settings=settings)

    assert "URL: https://imgur.com/a/AbC12" in caplog.text
    assert f"API URL: {ALBUM_API_URL}" in caplog.text
    assert "Status: 404" in caplog.text
    # diagnostic details stay out of the user message
    assert "404" not in exc_info.value.message
    assert ALBUM_API_URL not in exc_info.value.message


@responses.activate
def test_resolve_invalid_identifier_is_logged(settings, caplog):
    with caplog.at_level(logging.ERROR, logger="imgur_direct_links"):
        with pytest.raises(InvalidIdentifierError):
            resolve_direct_links("https://imgur.com/a/Ab$C12", settings=settings)

    assert "Original: Ab$C12, Sanitized: AbC12" in caplog.text
    assert "API URL" not in caplog.text
