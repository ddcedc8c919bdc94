"""Tests for YAML front matter splitting and validation."""

from __future__ import annotations

import datetime
import logging

import pytest
import yaml

from folio.exceptions import InvalidFrontmatterError
from folio.filesystem.frontmatter import (
    REQUIRED_FIELDS,
    calculate_reading_time,
    parse_tags,
    split_frontmatter,
    validate_metadata,
)


class TestRequiredFields:
    def test_required_fields(self) -> None:
        assert REQUIRED_FIELDS == ("title", "date", "excerpt")


class TestSplitFrontmatter:
    def test_split_basic(self) -> None:
        raw = "---\ntitle: Hello\ntags: [AI, Data]\n---\n# Heading\n\nBody.\n"
        metadata, body = split_frontmatter(raw)
        assert metadata["title"] == "Hello"
        assert metadata["tags"] == ["AI", "Data"]
        assert "# Heading" in body
        assert "title:" not in body

    def test_no_frontmatter_returns_full_text(self) -> None:
        raw = "# Just a title\n\nSome content.\n"
        metadata, body = split_frontmatter(raw)
        assert metadata == {}
        assert body == raw

    def test_unclosed_block_is_not_frontmatter(self) -> None:
        raw = "---\ntitle: Hello\n\nNo closing delimiter.\n"
        metadata, body = split_frontmatter(raw)
        assert metadata == {}
        assert body == raw

    def test_empty_block(self) -> None:
        metadata, body = split_frontmatter("---\n---\nBody only.\n")
        assert metadata == {}
        assert "Body only." in body

    def test_yaml_dates_are_parsed(self) -> None:
        metadata, _ = split_frontmatter("---\ndate: 2024-01-15\n---\nBody\n")
        assert metadata["date"] == datetime.date(2024, 1, 15)

    def test_malformed_yaml_raises(self) -> None:
        with pytest.raises(yaml.YAMLError):
            split_frontmatter("---\ntitle: [unclosed\n---\nBody\n")

    def test_non_mapping_block_raises(self) -> None:
        with pytest.raises(yaml.YAMLError, match="mapping"):
            split_frontmatter("---\n- a\n- b\n---\nBody\n")

    def test_horizontal_rule_in_body_is_kept(self) -> None:
        raw = "---\ntitle: T\n---\nAbove\n\n---\n\nBelow\n"
        metadata, body = split_frontmatter(raw)
        assert metadata == {"title": "T"}
        assert "Above" in body
        assert "Below" in body


class TestReadingTime:
    def test_four_hundred_words_is_two_minutes(self) -> None:
        assert calculate_reading_time("word " * 400) == "2 min read"

    def test_single_word_is_one_minute(self) -> None:
        assert calculate_reading_time("hello") == "1 min read"

    def test_empty_body_is_one_minute(self) -> None:
        assert calculate_reading_time("") == "1 min read"

    def test_rounds_up(self) -> None:
        assert calculate_reading_time("word " * 201) == "2 min read"

    def test_counts_whitespace_separated_tokens(self) -> None:
        body = "one\ttwo\nthree   four"
        assert calculate_reading_time(body, words_per_minute=2) == "2 min read"


class TestParseTags:
    def test_none(self) -> None:
        assert parse_tags(None) == []

    def test_preserves_order_and_case(self) -> None:
        assert parse_tags(["ai", "AI", "Data"]) == ["ai", "AI", "Data"]

    def test_stringifies_and_strips(self) -> None:
        assert parse_tags([" web ", 2024, None, ""]) == ["web", "2024"]

    def test_scalar_becomes_single_tag(self) -> None:
        assert parse_tags("AI", slug="post") == ["AI"]
        assert parse_tags(2024, slug="post") == ["2024"]

    def test_blank_scalar_gives_no_tags(self) -> None:
        assert parse_tags("   ", slug="post") == []

    def test_mapping_ignored_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="folio.filesystem.frontmatter"):
            assert parse_tags({"a": 1}, slug="post") == []
        assert "Ignoring tags of post post" in caplog.text


class TestValidateMetadata:
    def test_valid_metadata(self) -> None:
        meta = validate_metadata(
            {
                "title": "Hello",
                "date": "2024-03-01",
                "excerpt": "Short.",
                "tags": ["AI"],
                "image": "https://example.com/a.png",
                "author": "Guest",
                "featured": True,
            },
            "hello",
        )
        assert meta.title == "Hello"
        assert meta.date == "2024-03-01"
        assert meta.published_at.year == 2024
        assert meta.published_at.month == 3
        assert meta.tags == ["AI"]
        assert meta.image == "https://example.com/a.png"
        assert meta.author == "Guest"
        assert meta.featured is True

    def test_defaults(self) -> None:
        meta = validate_metadata({"title": "T", "date": "2024-01-01", "excerpt": "E"}, "t")
        assert meta.tags == []
        assert meta.image is None
        assert meta.author is None
        assert meta.featured is False

    @pytest.mark.parametrize("missing", ["title", "date", "excerpt"])
    def test_missing_required_field(self, missing: str) -> None:
        metadata = {"title": "T", "date": "2024-01-01", "excerpt": "E"}
        del metadata[missing]
        with pytest.raises(InvalidFrontmatterError) as exc_info:
            validate_metadata(metadata, "broken")
        assert exc_info.value.slug == "broken"
        assert missing in exc_info.value.reason

    def test_blank_required_field(self) -> None:
        with pytest.raises(InvalidFrontmatterError, match="empty"):
            validate_metadata({"title": "  ", "date": "2024-01-01", "excerpt": "E"}, "t")

    def test_yaml_date_object_becomes_iso_string(self) -> None:
        meta = validate_metadata(
            {"title": "T", "date": datetime.date(2024, 1, 15), "excerpt": "E"}, "t"
        )
        assert meta.date == "2024-01-15"
        assert meta.published_at.day == 15

    def test_unparseable_date(self) -> None:
        with pytest.raises(InvalidFrontmatterError, match="unparseable date"):
            validate_metadata({"title": "T", "date": "someday", "excerpt": "E"}, "t")

    def test_featured_string_values(self) -> None:
        base = {"title": "T", "date": "2024-01-01", "excerpt": "E"}
        assert validate_metadata({**base, "featured": "yes"}, "t").featured is True
        assert validate_metadata({**base, "featured": "false"}, "t").featured is False

    @pytest.mark.parametrize("raw", ["on", [1], 2])
    def test_unrecognized_featured_defaults_to_false(
        self, raw: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        base = {"title": "T", "date": "2024-01-01", "excerpt": "E"}
        with caplog.at_level(logging.WARNING, logger="folio.filesystem.frontmatter"):
            meta = validate_metadata({**base, "featured": raw}, "t")
        assert meta.featured is False
        assert meta.title == "T"
        assert "Ignoring featured flag of post t" in caplog.text

    def test_optional_field_problems_keep_post(self) -> None:
        meta = validate_metadata(
            {"title": "T", "date": "2024-01-01", "excerpt": "E", "tags": "AI", "featured": "on"},
            "t",
        )
        assert meta.tags == ["AI"]
        assert meta.featured is False
