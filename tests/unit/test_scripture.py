"""Tests for scripture title parsing."""

import pytest

from openlp_sync.scripture import (
    CitationParseError,
    parse_scripture_title,
    parse_slide_prefix,
)


def test_single_verse() -> None:
    ref = parse_scripture_title("John 3:16 NIV (NIV), Copyright 2011")

    assert ref.reference == "John 3:16"
    assert ref.book == "John"
    assert ref.chapter_start == 3
    assert ref.chapter_start_verse_start == 16
    assert ref.chapter_start_verse_end == 16
    assert ref.translation == "NIV"
    assert ref.abbreviation == "NIV"
    assert ref.copyright == "Copyright 2011"


def test_single_group_mirrors_into_end_fields() -> None:
    ref = parse_scripture_title("John 3:16-18 NIV (NIV), Copyright 2011")

    assert ref.chapter_end == 3
    assert ref.chapter_end_verse_start == 16
    assert ref.chapter_end_verse_end == 18


def test_second_group_without_chapter_continues_first_chapter() -> None:
    ref = parse_scripture_title("John 3:16-18, 20 NIV (NIV), Copyright 2011")

    assert ref.chapter_start_verse_end == 18
    assert ref.chapter_end == ref.chapter_start == 3
    assert ref.chapter_end_verse_start == 20
    assert ref.chapter_end_verse_end == 20
    assert ref.reference == "John 3:16-18, 20"


def test_second_group_with_its_own_chapter() -> None:
    ref = parse_scripture_title(
        "Genesis 1:26-31, 2:1-3 King James Version (KJV), Public Domain"
    )

    assert ref.book == "Genesis"
    assert (ref.chapter_start, ref.chapter_start_verse_start, ref.chapter_start_verse_end) == (
        1,
        26,
        31,
    )
    assert (ref.chapter_end, ref.chapter_end_verse_start, ref.chapter_end_verse_end) == (2, 1, 3)
    assert ref.translation == "King James Version"
    assert ref.abbreviation == "KJV"
    assert ref.copyright == "Public Domain"


def test_numbered_book() -> None:
    ref = parse_scripture_title("1 John 4:7-8 ESV (ESV), Crossway")

    assert ref.book == "1 John"
    assert ref.reference == "1 John 4:7-8"


def test_open_range_leaves_verse_end_absent() -> None:
    ref = parse_scripture_title("Psalm 23:1- NIV (NIV), Copyright 2011")

    assert ref.chapter_start_verse_start == 1
    assert ref.chapter_start_verse_end is None


@pytest.mark.parametrize(
    "title",
    [
        "Amazing Grace",
        "John NIV (NIV), Copyright 2011",
        "John 3:16 NIV, Copyright 2011",
        "John 16 NIV (NIV), Copyright 2011",
        "John 3:16, 17, 18 NIV (NIV), Copyright 2011",
    ],
)
def test_malformed_titles_raise(title: str) -> None:
    with pytest.raises(CitationParseError):
        parse_scripture_title(title)


def test_slide_prefix() -> None:
    assert parse_slide_prefix("3:16 For God so loved the world") == (3, 16)
    assert parse_slide_prefix("that he gave his one and only Son") is None
