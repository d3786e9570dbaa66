"""Tests for infrastructure.i18n.resolvers module."""

import pytest

from infrastructure.i18n import InvalidLocaleError, Locale, LocaleResolver


class TestLocaleResolver:
    """Tests for LocaleResolver.resolve_from_string()."""

    @pytest.fixture
    def resolver(self):
        return LocaleResolver()

    @pytest.mark.parametrize(
        "tag,language,region",
        [
            ("en-US", "en", "US"),
            ("fr-CA", "fr", "CA"),
            ("de-DE", "de", "DE"),
            ("ja-JP", "ja", "JP"),
        ],
    )
    def test_language_region_tag(self, resolver, tag, language, region):
        """A "xx-YY" tag yields language xx and region YY."""
        assert resolver.resolve_from_string(tag) == Locale(language, region)

    @pytest.mark.parametrize("tag", ["en", "fr", "de"])
    def test_tag_without_separator(self, resolver, tag):
        """A single-segment tag yields a locale without region."""
        locale = resolver.resolve_from_string(tag)
        assert locale.language == tag
        assert locale.region is None

    def test_empty_tag_raises(self, resolver):
        """An empty tag raises InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError):
            resolver.resolve_from_string("")

    def test_none_tag_raises(self, resolver):
        """A missing tag raises InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError):
            resolver.resolve_from_string(None)

    def test_whitespace_tag_raises(self, resolver):
        """A whitespace-only tag counts as missing."""
        with pytest.raises(InvalidLocaleError):
            resolver.resolve_from_string("   ")

    def test_missing_language_raises(self, resolver):
        """A tag with an empty language segment is rejected."""
        with pytest.raises(InvalidLocaleError) as exc_info:
            resolver.resolve_from_string("-US")
        assert exc_info.value.locale_tag == "-US"

    def test_invalid_locale_error_is_value_error(self, resolver):
        """InvalidLocaleError can be caught as ValueError."""
        with pytest.raises(ValueError):
            resolver.resolve_from_string("")

    def test_trailing_separator_leaves_region_unset(self, resolver):
        """"en-" is treated as a tag without region."""
        assert resolver.resolve_from_string("en-") == Locale("en")

    def test_underscore_separator(self, resolver):
        """"en_US" is parsed like "en-US"."""
        assert resolver.resolve_from_string("en_US") == Locale("en", "US")

    def test_extra_segments_ignored(self, resolver):
        """Only the first two segments are used."""
        assert resolver.resolve_from_string("zh-TW-Hant") == Locale("zh", "TW")

    def test_case_is_normalized(self, resolver):
        """Language is lower-cased and region upper-cased."""
        assert resolver.resolve_from_string("EN-us") == Locale("en", "US")

    def test_surrounding_whitespace_ignored(self, resolver):
        """Whitespace around the tag is ignored."""
        assert resolver.resolve_from_string(" fr-CA ") == Locale("fr", "CA")
