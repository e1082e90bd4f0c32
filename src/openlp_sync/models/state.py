"""Program state notifications pushed over the OpenLP websocket."""

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class PayloadDecodeError(ValueError):
    """A websocket message is not a program state notification."""


class DisplayMode(StrEnum):
    """What the live display is showing."""

    BLANK = "blank"
    DESKTOP = "desktop"
    THEME = "theme"
    PRESENTATION = "presentation"


@dataclass(frozen=True)
class ProgramState:
    """One decoded notification.

    Only ``service``, ``item`` and ``slide`` drive synchronization. The other
    fields are kept so subscribers can read them off the engine.
    """

    service: int
    item: str
    slide: int
    counter: int = 0
    blank: bool = False
    display: bool = False
    theme: bool = False
    twelve: bool = False
    version: int | None = None
    is_secure: bool = False
    chord_notation: str | None = None

    @property
    def mode(self) -> DisplayMode:
        return get_mode(self)

    @property
    def slide_id(self) -> tuple[str, int]:
        return (self.item, self.slide)

    @property
    def position_key(self) -> tuple[int, str, int]:
        """Composite key used to drop positional duplicates."""
        return (self.service, self.item, self.slide)


def get_mode(state: ProgramState) -> DisplayMode:
    """Compute the display mode: blank > desktop > theme > presentation."""
    if state.blank:
        return DisplayMode.BLANK
    if state.display:
        return DisplayMode.DESKTOP
    if state.theme:
        return DisplayMode.THEME
    return DisplayMode.PRESENTATION


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass, but never a valid counter
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"bad {key!r} field: {value!r}"
        raise PayloadDecodeError(msg)
    return value


def decode_program_state(raw: str | bytes) -> ProgramState:
    """Decode a websocket message into a ProgramState.

    OpenLP wraps the state in a ``{"results": {...}}`` envelope; bare state
    objects are accepted as well.

    Raises:
        PayloadDecodeError: The message is not JSON, or required fields are
            missing or mistyped.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"notification is not valid JSON: {e}"
        raise PayloadDecodeError(msg) from e

    if isinstance(data, dict) and isinstance(data.get("results"), dict):
        data = data["results"]
    if not isinstance(data, dict):
        msg = f"notification is not an object: {type(data).__name__}"
        raise PayloadDecodeError(msg)

    item = data.get("item")
    if item is None:
        item = ""
    if not isinstance(item, str):
        msg = f"bad 'item' field: {item!r}"
        raise PayloadDecodeError(msg)

    version = data.get("version")
    return ProgramState(
        service=_require_int(data, "service"),
        item=item,
        slide=_require_int(data, "slide"),
        counter=data.get("counter") or 0,
        blank=bool(data.get("blank")),
        display=bool(data.get("display")),
        theme=bool(data.get("theme")),
        twelve=bool(data.get("twelve")),
        version=version if isinstance(version, int) else None,
        is_secure=bool(data.get("isSecure")),
        chord_notation=data.get("chordNotation"),
    )
