"""Shared test fixtures."""

import copy
from typing import Any

import pytest

from openlp_sync.engine import SyncEngine
from tests.unit.fakes import FakeApi

SERVICE_ITEMS: list[dict[str, Any]] = [
    {
        "id": "G0",
        "title": "Welcome",
        "plugin": "custom",
        "ccli_number": "",
        "notes": "",
        "is_valid": True,
        "selected": False,
    },
    {
        "id": "G1",
        "title": "Amazing Grace",
        "plugin": "songs",
        "ccli_number": "22025",
        "notes": "key of G",
        "is_valid": True,
        "selected": True,
    },
    {
        "id": "G2",
        "title": "John 3:16-18, 20 NIV (NIV), Copyright 2011",
        "plugin": "bibles",
        "ccli_number": "",
        "notes": "",
        "is_valid": True,
        "selected": False,
    },
]

SONG_LIVE_ITEM: dict[str, Any] = {
    "id": "G1",
    "title": "Amazing Grace",
    "name": "songs",
    "type": "ServiceItemType.Text",
    "theme": "Sunday",
    "notes": "",
    "audit": ["Amazing Grace", "John Newton", "Public Domain", "22025"],
    "footer": ["Amazing Grace", "John Newton"],
    "capabilities": [2, 3],
    "backgroundAudio": [],
    "isThemeOverwritten": False,
    "fromPlugin": False,
    "data": {"title": "amazing grace@", "authors": "John Newton"},
    "slides": [
        {
            "text": "Amazing grace how sweet the sound",
            "html": "Amazing grace how sweet the sound",
            "tag": "V1",
            "title": "Amazing Grace",
            "chords": "",
            "footer": "Amazing Grace<br>John Newton",
            "selected": False,
        },
        {
            "text": "'Twas grace that taught my heart to fear",
            "html": "'Twas grace that taught my heart to fear",
            "tag": "V2",
            "title": "Amazing Grace",
            "chords": "",
            "footer": "Amazing Grace<br>John Newton",
            "selected": True,
        },
        {
            "text": "Through many dangers, toils and snares",
            "html": "Through many dangers, toils and snares",
            "tag": "V3",
            "title": "Amazing Grace",
            "chords": "",
            "footer": "Amazing Grace<br>John Newton",
            "selected": False,
        },
    ],
}

SCRIPTURE_LIVE_ITEM: dict[str, Any] = {
    "id": "G2",
    "title": "John 3:16-18, 20 NIV (NIV), Copyright 2011",
    "name": "bibles",
    "type": "ServiceItemType.Text",
    "theme": None,
    "notes": "",
    "audit": [],
    "footer": ["John 3:16-18, 20", "NIV", "Copyright 2011"],
    "slides": [
        {"text": "3:16 For God so loved the world", "html": "", "tag": "1"},
        {"text": "that he gave his one and only Son", "html": "", "tag": "2"},
        {"text": "3:17 For God did not send his Son", "html": "", "tag": "3"},
        {"text": "into the world to condemn the world", "html": "", "tag": "4"},
        {"text": "but to save the world through him.", "html": "", "tag": "5"},
    ],
}


@pytest.fixture
def fake_api() -> FakeApi:
    """Return a FakeApi serving a three item service with a song live."""
    api = FakeApi()
    api.add_response("service/items", copy.deepcopy(SERVICE_ITEMS))
    api.add_response("controller/live-items", copy.deepcopy(SONG_LIVE_ITEM))
    return api


@pytest.fixture
def engine(fake_api: FakeApi) -> SyncEngine:
    return SyncEngine(fake_api)
