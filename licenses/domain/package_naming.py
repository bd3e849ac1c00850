"""
Package naming helpers.

Derive short identifiers from fully-qualified package names
(``vendor/kirby-copilot``) and render compatibility ranges for display.
"""

# Distribution marker prefixed to plugin names inside package names
PACKAGE_MARKER = "kirby"

# Disjunction operator in compatibility ranges
RANGE_OR = "||"


def strip_marker(name: str, marker: str = PACKAGE_MARKER) -> str:
    """Remove a leading ``<marker>-`` segment from a plugin name."""
    prefix = f"{marker}-"
    if marker and name.startswith(prefix) and len(name) > len(prefix):
        return name[len(prefix):]
    return name


def to_plugin_id(package_name: str, marker: str = PACKAGE_MARKER) -> str:
    """
    Convert a package name to a short plugin identifier.

    Args:
        package_name: Package name, e.g. ``johannschopplich/kirby-copilot``
        marker: Marker segment to strip from the plugin name

    Returns:
        Short identifier, e.g. ``copilot``
    """
    name = package_name.rsplit("/", 1)[-1]
    return strip_marker(name, marker)


def to_api_prefix(package_name: str, marker: str = PACKAGE_MARKER) -> str:
    """
    Convert a package name to its API namespace prefix.

    Args:
        package_name: Package name

    Returns:
        Prefix in the form ``__<plugin-id>__``
    """
    return f"__{to_plugin_id(package_name, marker)}__"


def to_package_slug(package_name: str) -> str:
    """Replace the vendor separator with a hyphen."""
    return package_name.replace("/", "-")


def format_compatibility(compatibility: str) -> str:
    """
    Render a compatibility range for humans.

    ``^1 || ^2 || ^3`` becomes ``v1, v2, v3``. Disjuncts keep their order.

    Args:
        compatibility: Compatibility range expression

    Returns:
        Comma-separated list of versions
    """
    versions = [
        f"v{part.strip().lstrip('^').strip()}"
        for part in compatibility.split(RANGE_OR)
        if part.strip()
    ]
    return ", ".join(versions)
