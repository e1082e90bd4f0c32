"""Tests for program state decoding and display mode."""

import json

import pytest

from openlp_sync.models.state import (
    DisplayMode,
    PayloadDecodeError,
    ProgramState,
    decode_program_state,
    get_mode,
)
from tests.unit.fakes import notification


def test_decode_unwraps_results_envelope() -> None:
    state = decode_program_state(notification(service=5, item="G1", slide=2))

    assert state.service == 5
    assert state.item == "G1"
    assert state.slide == 2
    assert state.counter == 1
    assert state.version == 3
    assert state.chord_notation == "english"
    assert state.twelve is True


def test_decode_accepts_bare_object_and_bytes() -> None:
    raw = json.dumps({"service": 1, "item": "abc", "slide": 0}).encode("utf-8")

    state = decode_program_state(raw)

    assert state.position_key == (1, "abc", 0)
    assert state.slide_id == ("abc", 0)
    assert state.blank is False


def test_decode_treats_missing_item_as_nothing_live() -> None:
    state = decode_program_state(json.dumps({"service": 1, "slide": 0}))

    assert state.item == ""


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        b"\xff\xfe",
        "[1, 2, 3]",
        json.dumps({"item": "G1", "slide": 0}),
        json.dumps({"service": "5", "item": "G1", "slide": 0}),
        json.dumps({"service": 5, "item": "G1", "slide": True}),
        json.dumps({"service": 5, "item": 7, "slide": 0}),
    ],
)
def test_decode_rejects_malformed_payloads(raw: str | bytes) -> None:
    with pytest.raises(PayloadDecodeError):
        decode_program_state(raw)


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        ({"blank": True, "display": True}, DisplayMode.BLANK),
        ({"blank": False, "display": True, "theme": True}, DisplayMode.DESKTOP),
        ({"theme": True}, DisplayMode.THEME),
        ({}, DisplayMode.PRESENTATION),
    ],
)
def test_mode_precedence(flags: dict[str, bool], expected: DisplayMode) -> None:
    state = ProgramState(service=1, item="G1", slide=0, **flags)

    assert get_mode(state) == expected
    assert state.mode == expected.value
