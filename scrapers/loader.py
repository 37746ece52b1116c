"""Discovery of provider plugins in scrapers/plugins/.

A convenience seam for loading providers into the Repository by language;
it does not instantiate providers or call them on the host's behalf.
"""

import importlib
import sys
from os import listdir
from os.path import abspath, dirname, isfile, join
from typing import Any, Protocol

from models.config import settings
from models.models import FetchFilters, ProviderConfig


class ProviderProtocol(Protocol):
    """Protocol for catalog provider plugins.

    Providers implementing this protocol serve catalog pages and detail
    records to the host. Uses structural typing (duck typing) - no
    inheritance required.
    """

    config: ProviderConfig  # Static descriptor (name, unique id, filters)
    languages: list[str]  # Supported languages (e.g., ["en"])

    def fetch(self, filters: FetchFilters | dict) -> dict[str, Any]:
        """Fetch one catalog page.

        Args:
            filters: Keywords, genre, sorter, order and page

        Returns:
            {"results": [summary, ...], "hasMore": bool}
        """
        ...

    def detail(self, anime_id: str, old_data: dict | None = None, debug: bool = False) -> dict[str, Any]:
        """Fetch the detail record of one catalog item.

        Args:
            anime_id: Value of the provider's unique id field
            old_data: Summary the host already holds, if any
            debug: Host debug flag

        Returns:
            Detail record (show or movie variant)
        """
        ...


def get_resource_path(relative_path):
    """Get the path to resources, whether running as script or executable."""
    if hasattr(sys, "_MEIPASS"):
        # PyInstaller executable
        return join(sys._MEIPASS, relative_path)
    # Use directory where this file is located (works for both dev and installed)
    return join(dirname(abspath(__file__)), relative_path)


def available_plugins() -> list[str]:
    """Names of the plugin modules shipped in scrapers/plugins/."""
    path = get_resource_path("plugins/")
    system = {"__init__.py"}
    return sorted(
        file[:-3]
        for file in listdir(path)
        if isfile(join(path, file)) and file.endswith(".py") and file not in system
    )


def load_plugins(languages: set[str] | dict, plugins=None) -> None:
    """Load plugins based on settings and language filters.

    Args:
        languages: Supported languages (e.g., {"en"})
        plugins: Optional list of specific plugins to load (overrides settings)
                 If None, loads all plugins except disabled ones
    """
    if plugins is None:
        disabled_plugins = set(settings.plugins.disabled_plugins)
        plugins = [p for p in available_plugins() if p not in disabled_plugins]

    for plugin in plugins:
        plugin_module = importlib.import_module("scrapers.plugins." + plugin)
        plugin_module.load(languages)
