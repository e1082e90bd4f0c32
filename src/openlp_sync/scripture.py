"""Parse OpenLP bible item titles into structured references.

OpenLP titles bible items like ``"John 3:16-18, 20 NIV (NIV), Copyright 2011"``.
Parsing the title is the only source that works for every item in a service:
the live item footer carries the same data, but only for the item on screen.
"""

import re
from dataclasses import dataclass

_TITLE_RE = re.compile(
    r"^(\d?[A-Za-z\s]+)\s([\d:,\s-]+)\s([A-Za-z\s]+)\s\(([A-Z]+)\), (.+)",
    re.DOTALL,
)
_GROUP_RE = re.compile(r"^(?:(\d+):)?(\d+)(-?)(\d+)?$")
_SLIDE_PREFIX_RE = re.compile(r"^(\d+):(\d+)")


class CitationParseError(ValueError):
    """A title does not look like an OpenLP scripture reference."""


@dataclass(frozen=True)
class ScriptureReference:
    """A parsed scripture reference.

    Verse ends are None for open ranges (``"16-"``). A reference with a single
    group mirrors the start chapter into the end fields.
    """

    reference: str
    book: str
    translation: str
    abbreviation: str
    copyright: str
    chapter_start: int
    chapter_start_verse_start: int
    chapter_start_verse_end: int | None
    chapter_end: int
    chapter_end_verse_start: int
    chapter_end_verse_end: int | None


@dataclass(frozen=True)
class SlideScripture(ScriptureReference):
    """A scripture reference narrowed to the chapter and verse a slide starts at."""

    slide_chapter: int | None = None
    slide_verse: int | None = None


def _parse_group(group: str) -> tuple[int | None, int, int | None]:
    """Parse ``[chapter:]verse[-[verse]]`` into (chapter, verse_start, verse_end)."""
    match = _GROUP_RE.match(group.strip())
    if not match:
        msg = f"bad verse range: {group!r}"
        raise CitationParseError(msg)
    chapter, start, dash, end = match.groups()
    verse_start = int(start)
    if end is not None:
        verse_end: int | None = int(end)
    elif dash:
        verse_end = None
    else:
        verse_end = verse_start
    return (int(chapter) if chapter else None), verse_start, verse_end


def parse_scripture_title(title: str) -> ScriptureReference:
    """Parse a bible item title.

    Args:
        title: ``<Book> <range> <Translation> (<Abbrev>), <Copyright>``, where
            range is one or two comma separated ``chapter:verse[-verse]`` groups.
            The second group may omit the chapter, continuing the first one.

    Raises:
        CitationParseError: The title or its range does not match.
    """
    match = _TITLE_RE.match(title)
    if not match:
        msg = f"not a scripture title: {title!r}"
        raise CitationParseError(msg)
    book, verses, translation, abbreviation, copyright_ = match.groups()

    groups = verses.strip().split(", ")
    if len(groups) > 2:
        msg = f"too many verse groups in {verses!r}"
        raise CitationParseError(msg)

    chapter_start, start_verse_start, start_verse_end = _parse_group(groups[0])
    if chapter_start is None:
        msg = f"first verse group has no chapter: {groups[0]!r}"
        raise CitationParseError(msg)

    if len(groups) == 1:
        chapter_end = chapter_start
        end_verse_start, end_verse_end = start_verse_start, start_verse_end
    else:
        chapter, end_verse_start, end_verse_end = _parse_group(groups[1])
        chapter_end = chapter if chapter is not None else chapter_start

    return ScriptureReference(
        reference=f"{book} {verses.strip()}",
        book=book.strip(),
        translation=translation.strip(),
        abbreviation=abbreviation,
        copyright=copyright_.strip(),
        chapter_start=chapter_start,
        chapter_start_verse_start=start_verse_start,
        chapter_start_verse_end=start_verse_end,
        chapter_end=chapter_end,
        chapter_end_verse_start=end_verse_start,
        chapter_end_verse_end=end_verse_end,
    )


def parse_slide_prefix(text: str) -> tuple[int, int] | None:
    """Return (chapter, verse) when slide text starts with ``chapter:verse``."""
    match = _SLIDE_PREFIX_RE.match(text)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))
