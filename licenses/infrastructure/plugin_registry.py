"""
Static implementation of PluginRegistry port.

Serves installed plugin versions from an explicit mapping, by default the
``LICENSING["PLUGIN_VERSIONS"]`` setting.
"""
import logging
from typing import Mapping, Optional

from core.conf import licensing_settings
from licenses.domain.package_naming import strip_marker
from licenses.ports.plugin_registry import PluginRegistry

logger = logging.getLogger(__name__)


class StaticPluginRegistry(PluginRegistry):
    """PluginRegistry backed by a package name to version mapping."""

    def __init__(self, versions: Optional[Mapping[str, str]] = None):
        """
        Initialize registry.

        Args:
            versions: Mapping of package name to installed version
        """
        self.versions = dict(versions or {})

    @classmethod
    def from_settings(cls) -> "StaticPluginRegistry":
        """Build a registry from the licensing settings."""
        return cls(licensing_settings()["PLUGIN_VERSIONS"])

    def get_installed_version(self, package_name: str) -> Optional[str]:
        """
        Get the installed version of a plugin.

        Plugins are often registered without the distribution marker
        (``vendor/kirby-copilot`` as ``vendor/copilot``); both names are tried.

        Args:
            package_name: Package name

        Returns:
            Installed version, or None if the plugin is not registered
        """
        if package_name in self.versions:
            return self.versions[package_name]

        vendor, separator, name = package_name.rpartition("/")
        plugin_name = f"{vendor}{separator}{strip_marker(name)}"
        version = self.versions.get(plugin_name)
        if version is None:
            logger.debug("Plugin %s is not installed", package_name)
        return version
