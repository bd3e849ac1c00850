"""
Plugin registry port (interface).

Resolves the installed version of a plugin. The host environment provides
the implementation.
"""
from abc import ABC, abstractmethod
from typing import Optional


class PluginRegistry(ABC):
    """Abstract lookup of installed plugin versions."""

    @abstractmethod
    def get_installed_version(self, package_name: str) -> Optional[str]:
        """
        Get the installed version of a plugin.

        Args:
            package_name: Package name, e.g. ``vendor/kirby-copilot``

        Returns:
            Installed version string, or None if the plugin is not installed
        """
        pass
