"""Tests for the location list projection (truncation and rows)."""

import pytest

from places_map.constants import LocationConfig
from places_map.model.location_store import LocationStore
from places_map.ui.location_list import ListRow, build_rows, escape_markdown, list_header, truncate_details
from tests.conftest import add_location


class TestTruncateDetails:
    """Preview text for list rows."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", ""),
            ("short", "short"),
            ("x" * 50, "x" * 50),  # exactly at the limit: untouched
            ("x" * 51, "x" * 50 + "..."),
            ("No details provided.", "No details provided."),
        ],
    )
    def test_truncation(self, text: str, expected: str) -> None:
        assert truncate_details(text=text) == expected

    def test_custom_limit(self) -> None:
        assert truncate_details(text="abcdef", limit=3) == "abc" + LocationConfig.ELLIPSIS


class TestBuildRows:
    """Rows mirror the store snapshot without changing it."""

    def test_rows_follow_store_order(self, three_locations: LocationStore) -> None:
        rows = build_rows(snapshot=three_locations.snapshot())
        assert [row.id for row in rows] == ["P1", "P2", "P3"]
        assert rows[0] == ListRow(id="P1", name="Home", preview="Lived here 2015-2020")

    def test_long_details_not_mutated(self, store: LocationStore) -> None:
        """Truncation is display only; the stored text stays complete."""
        long_text = "A" * 120
        loc = add_location(store=store, name="Long", details=long_text)

        rows = build_rows(snapshot=store.snapshot())

        assert rows[0].preview == "A" * 50 + "..."
        assert store.get(location_id=loc.id).details == long_text

    def test_empty_store(self, store: LocationStore) -> None:
        assert build_rows(snapshot=store.snapshot()) == []

    def test_header_shows_count(self) -> None:
        assert list_header(count=0) == "Entered Locations (0)"
        assert list_header(count=3) == "Entered Locations (3)"


class TestEscapeMarkdown:
    """User text is shown literally, never interpreted as Markdown."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Home", "Home"),
            ("***", r"\*\*\*"),
            ("_x_", r"\_x\_"),
            ("# Not a heading", r"\# Not a heading"),
            ("[a](b)", r"\[a\]\(b\)"),
            ("a\\b", "a\\\\b"),
            ("$5 :smile:", r"\$5 \:smile\:"),
        ],
    )
    def test_special_characters_escaped(self, text: str, expected: str) -> None:
        assert escape_markdown(text=text) == expected

    def test_line_breaks_kept(self) -> None:
        assert escape_markdown(text="line one\nline two") == "line one  \nline two"

    def test_bold_wrapped_name_is_not_a_rule(self) -> None:
        """A name of asterisks stays inside the bold markers instead of becoming a horizontal rule."""
        rendered = f"**{escape_markdown(text='***')}**"
        assert rendered == r"**\*\*\***"
        assert "*" * 4 not in rendered
