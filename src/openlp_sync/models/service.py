"""The live model: Service -> Item -> Slide.

Nothing here stores a sibling or an "active" flag. Every cross reference is
resolved against the engine's current state when it is read, because the
engine replaces the service and the live item wholesale while older objects
may still be referenced by subscribers.
"""

from collections.abc import Iterator, Sequence
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from openlp_sync.config import MAX_CONTINUATION_DEPTH
from openlp_sync.scripture import (
    ScriptureReference,
    SlideScripture,
    parse_scripture_title,
    parse_slide_prefix,
)

if TYPE_CHECKING:
    from openlp_sync.engine import SyncEngine

# OpenLP plugin name -> item type
_PLUGIN_TYPES = {"songs": "song", "bibles": "scripture"}


@dataclass(frozen=True)
class SongInfo:
    """Song metadata. Slide level views also carry the verse tag and chords."""

    ccli: str | None
    authors: str | None
    tag: str | None = None
    chords: str | None = None


class Slide:
    """One displayable slide of the live item.

    Identity is ``(item id, index)``.
    """

    def __init__(self, item: "Item", index: int, api: dict[str, Any]) -> None:
        self.item = item
        self.index = index
        self.api = api

    def __repr__(self) -> str:
        return f"Slide(id={self.id!r})"

    @property
    def id(self) -> tuple[str | None, int]:
        return (self.item.id, self.index)

    @property
    def text(self) -> str:
        return self.api.get("text") or ""

    @property
    def html(self) -> str:
        return self.api.get("html") or ""

    @property
    def tag(self) -> str | None:
        return self.api.get("tag")

    @property
    def chords(self) -> str | None:
        return self.api.get("chords")

    @property
    def footer(self) -> str | None:
        return self.api.get("footer")

    @property
    def title(self) -> str | None:
        # Item title first: OpenLP documents the slide title as a copy of it.
        return self.item.title or self.api.get("title")

    @property
    def type(self) -> str | None:
        return self.item.type

    @property
    def is_active(self) -> bool:
        return self.id == self.item.engine.last_slide_id

    @property
    def previous(self) -> "Slide | None":
        if self.index <= 0:
            return None
        return self.item.slide_at(self.index - 1)

    @property
    def next(self) -> "Slide | None":
        return self.item.slide_at(self.index + 1)

    @property
    def song(self) -> SongInfo | None:
        song = self.item.song
        if song is None:
            return None
        return SongInfo(ccli=song.ccli, authors=song.authors, tag=self.tag, chords=self.chords)

    @property
    def scripture(self) -> SlideScripture | None:
        """The item's reference plus the chapter and verse this slide starts at.

        OpenLP splits long passages across slides mid-verse; such a slide has no
        ``chapter:verse`` prefix and continues the closest earlier slide that has one.

        Raises:
            CitationParseError: The item title is not a scripture reference.
        """
        reference = self.item.scripture
        if reference is None:
            return None

        chapter = verse = None
        slide: Slide | None = self
        for _ in range(MAX_CONTINUATION_DEPTH):
            if slide is None:
                break
            position = parse_slide_prefix(slide.text)
            if position is not None:
                chapter, verse = position
                break
            slide = slide.previous

        return SlideScripture(**asdict(reference), slide_chapter=chapter, slide_verse=verse)


class Item:
    """One service item, or the item currently live.

    ``service_item`` is the lightweight descriptor from ``service/items``;
    ``live_item`` is the detailed one from ``controller/live-items``. Views
    prefer live data and fall back to the service descriptor. For a live item
    that descriptor is looked up in the engine's current service on every
    access, so a new service revision is picked up without rebuilding the item.
    Only live items have slides.
    """

    def __init__(
        self,
        engine: "SyncEngine",
        *,
        service_item: dict[str, Any] | None = None,
        live_item: dict[str, Any] | None = None,
    ) -> None:
        self.engine = engine
        self._service_item = service_item
        self.live_item = live_item
        raw_slides = (live_item or {}).get("slides") or []
        self.slides: tuple[Slide, ...] = tuple(
            Slide(self, idx, slide) for idx, slide in enumerate(raw_slides)
        )

    @property
    def service_item(self) -> dict[str, Any] | None:
        if self.live_item is None:
            return self._service_item
        service = self.engine.service
        member = service.find(self.live_item.get("id")) if service is not None else None
        if member is None:
            return self._service_item
        return member.service_item

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, title={self.title!r})"

    def _get(self, key: str) -> Any:
        live = (self.live_item or {}).get(key)
        if live:
            return live
        return (self.service_item or {}).get(key)

    @property
    def id(self) -> str | None:
        return self._get("id")

    @property
    def title(self) -> str | None:
        return self._get("title")

    @property
    def notes(self) -> str | None:
        return self._get("notes")

    @property
    def plugin(self) -> str | None:
        # service/items calls it "plugin", controller/live-items calls it "name"
        return (self.service_item or {}).get("plugin") or (self.live_item or {}).get("name")

    @property
    def type(self) -> str | None:
        plugin = self.plugin
        return _PLUGIN_TYPES.get(plugin, plugin) if plugin else None

    @property
    def theme(self) -> str | None:
        return (self.live_item or {}).get("theme")

    @property
    def content(self) -> str | None:
        """Live display type, e.g. ``ServiceItemType.Text``."""
        return (self.live_item or {}).get("type")

    @property
    def service(self) -> "Service | None":
        """The engine's current service, when this item is part of it."""
        service = self.engine.service
        if service is None or service.index_of(self.id) is None:
            return None
        return service

    @property
    def index(self) -> int | None:
        service = self.engine.service
        return service.index_of(self.id) if service is not None else None

    @property
    def previous(self) -> "Item | None":
        index = self.index
        service = self.engine.service
        if index is None or service is None or index == 0:
            return None
        return service[index - 1]

    @property
    def next(self) -> "Item | None":
        index = self.index
        service = self.engine.service
        if index is None or service is None or index + 1 >= len(service):
            return None
        return service[index + 1]

    @property
    def is_active(self) -> bool:
        live = self.engine.item
        return live is not None and self.id is not None and self.id == live.id

    @property
    def active_slide(self) -> Slide | None:
        for slide in self.slides:
            if slide.is_active:
                return slide
        return None

    def slide_at(self, index: int) -> Slide | None:
        if 0 <= index < len(self.slides):
            return self.slides[index]
        return None

    @property
    def song(self) -> SongInfo | None:
        if self.type != "song":
            return None
        audit = (self.live_item or {}).get("audit") or []
        return SongInfo(
            ccli=(self.service_item or {}).get("ccli_number") or None,
            authors=audit[1] if len(audit) > 1 else None,
        )

    @property
    def scripture(self) -> ScriptureReference | None:
        """Reference parsed from the title.

        Raises:
            CitationParseError: The title is not a scripture reference.
        """
        if self.type != "scripture":
            return None
        return parse_scripture_title(self.title or "")


class Service:
    """One revision of the service (the ordered program).

    A new revision number means a new Service; items are never patched in place.
    """

    def __init__(self, engine: "SyncEngine", id: int, items: Sequence[Item]) -> None:
        self.engine = engine
        self.id = id
        self.items: tuple[Item, ...] = tuple(items)

    def __repr__(self) -> str:
        return f"Service(id={self.id!r}, items={len(self.items)})"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def index_of(self, item_id: str | None) -> int | None:
        if item_id is None:
            return None
        for idx, item in enumerate(self.items):
            if item.id == item_id:
                return idx
        return None

    def find(self, item_id: str | None) -> Item | None:
        idx = self.index_of(item_id)
        return self.items[idx] if idx is not None else None

    @property
    def active(self) -> Item | None:
        for item in self.items:
            if item.is_active:
                return item
        return None

    @property
    def songs(self) -> list[Item]:
        return [item for item in self.items if item.type == "song"]

    @property
    def scriptures(self) -> list[Item]:
        return [item for item in self.items if item.type == "scripture"]
