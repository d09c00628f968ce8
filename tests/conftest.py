import json
from pathlib import Path

import pytest

from imgur_direct_links.config import Settings

DATA_DIR = Path(__file__).parent / "data"


def load_fixture(name):
    fixture_path = DATA_DIR / name
    with fixture_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def settings():
    return Settings(site_url="https://example.test", timeout=5)


@pytest.fixture
def album_payload():
    return load_fixture("album_sample.json")


@pytest.fixture
def image_payload():
    return load_fixture("image_sample.json")
