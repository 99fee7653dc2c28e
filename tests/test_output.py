"""
Unit tests for output format resolution and rendering.
"""

import json

import pytest
import yaml

from cli.output import (
    OutputFormat, OutputOptions, render_json, render_yaml, render_fetch_table, format_bool
)
from config.error_handling import FormatResolutionError


SAMPLE = {
    'url': 'https://example.com/post',
    'playlist': '',
    'out_dir': 'docs/research-external/blog',
    'analyze': False,
    'status': 'stub',
    'next_step': 'Phase 2 ingestion pipeline'
}


class TestOutputOptions:
    """Test cases for OutputOptions."""

    def test_resolve_each_format(self):
        """Test that every supported value resolves to its format."""
        for fmt in OutputFormat:
            options = OutputOptions(fmt.value)
            assert options.resolve() is fmt
            assert options.is_(fmt)

    def test_resolve_is_case_insensitive(self):
        """Test that values are normalised before resolution."""
        assert OutputOptions("JSON").resolve() is OutputFormat.JSON
        assert OutputOptions(" Yaml ").resolve() is OutputFormat.YAML

    def test_resolve_empty_uses_default(self):
        """Test that a missing value falls back to the default format."""
        assert OutputOptions(None).resolve() is OutputFormat.TABLE
        assert OutputOptions("").resolve() is OutputFormat.TABLE
        assert OutputOptions("", default=OutputFormat.JSON).resolve() is OutputFormat.JSON

    def test_resolve_invalid_raises(self):
        """Test that unknown formats are rejected with the valid choices."""
        options = OutputOptions("xml")

        with pytest.raises(FormatResolutionError) as excinfo:
            options.resolve()

        error = excinfo.value
        assert error.value == "xml"
        assert error.choices == ['table', 'json', 'yaml', 'quiet']
        assert "xml" in error.message
        assert error.hint == "valid formats: table, json, yaml, quiet"
        assert error.exit_code == 2

    def test_is_before_resolve_raises(self):
        """Test that format checks require resolution first."""
        with pytest.raises(FormatResolutionError):
            OutputOptions("json").is_(OutputFormat.JSON)

    def test_is_other_format(self):
        options = OutputOptions("quiet")
        options.resolve()

        assert options.is_(OutputFormat.QUIET)
        assert not options.is_(OutputFormat.TABLE)


class TestRenderers:
    """Test cases for the rendering helpers."""

    def test_render_json(self):
        """Test JSON rendering uses 2-space indentation."""
        text = render_json(SAMPLE)

        assert text.endswith("}\n")
        assert text.startswith('{\n  "url": "https://example.com/post",\n')
        assert json.loads(text) == SAMPLE

    def test_render_yaml(self):
        """Test YAML rendering keeps key order and decodes back."""
        text = render_yaml(SAMPLE)

        assert text.splitlines()[0] == "url: https://example.com/post"
        assert [line.split(':')[0] for line in text.splitlines()] == list(SAMPLE)
        assert yaml.safe_load(text) == SAMPLE

    def test_render_table_url_only(self):
        text = render_fetch_table(SAMPLE)

        assert text == (
            "blog fetch (stub) -> out_dir=docs/research-external/blog analyze=false\n"
            "  URL: https://example.com/post\n"
        )

    def test_render_table_playlist_only(self):
        """Test that the URL line is omitted when no URL was given."""
        data = dict(SAMPLE, url='', playlist='feed.xml', out_dir='/tmp/x', analyze=True)
        text = render_fetch_table(data)

        assert "out_dir=/tmp/x analyze=true" in text
        assert "  Playlist: feed.xml" in text
        assert "URL:" not in text

    def test_render_table_both_sources(self):
        data = dict(SAMPLE, playlist='feed.xml')
        lines = render_fetch_table(data).splitlines()

        assert lines[1] == "  URL: https://example.com/post"
        assert lines[2] == "  Playlist: feed.xml"

    def test_format_bool(self):
        assert format_bool(True) == "true"
        assert format_bool(False) == "false"
