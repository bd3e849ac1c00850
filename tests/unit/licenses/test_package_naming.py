"""
Unit tests for package naming helpers.
"""

from licenses.domain.package_naming import (
    format_compatibility,
    strip_marker,
    to_api_prefix,
    to_package_slug,
    to_plugin_id,
)


class TestPluginId:
    """Tests for to_plugin_id and to_api_prefix."""

    def test_strips_vendor_and_marker(self):
        assert to_plugin_id("johannschopplich/kirby-copilot") == "copilot"

    def test_name_without_marker_is_kept(self):
        assert to_plugin_id("johannschopplich/copilot") == "copilot"

    def test_package_without_vendor(self):
        assert to_plugin_id("kirby-seo-audit") == "seo-audit"

    def test_custom_marker(self):
        assert to_plugin_id("acme/wp-forms", marker="wp") == "forms"

    def test_marker_alone_is_not_stripped(self):
        """A plugin called just 'kirby-' keeps its name."""
        assert strip_marker("kirby-") == "kirby-"

    def test_api_prefix(self):
        assert to_api_prefix("johannschopplich/kirby-copilot") == "__copilot__"


class TestPackageSlug:
    """Tests for to_package_slug."""

    def test_replaces_vendor_separator(self):
        assert to_package_slug("johannschopplich/kirby-copilot") == "johannschopplich-kirby-copilot"

    def test_without_vendor(self):
        assert to_package_slug("kirby-copilot") == "kirby-copilot"


class TestFormatCompatibility:
    """Tests for format_compatibility."""

    def test_multiple_major_versions(self):
        assert format_compatibility("^1 || ^2 || ^3") == "v1, v2, v3"

    def test_single_version(self):
        assert format_compatibility("^2") == "v2"

    def test_keeps_order(self):
        assert format_compatibility("^3 || ^1") == "v3, v1"

    def test_full_versions(self):
        assert format_compatibility("^1.2.0 || ^2.0.0") == "v1.2.0, v2.0.0"

    def test_tolerates_missing_whitespace(self):
        assert format_compatibility("^1||^2") == "v1, v2"

    def test_empty_range(self):
        assert format_compatibility("") == ""
