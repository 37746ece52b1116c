"""
Tests for scrapers/loader.py

Coverage:
- Plugin discovery from scrapers/plugins/
- Plugin registration in Repository
- Language filtering
- Disabled plugins from settings
"""

from pathlib import Path

from models.config import settings
from scrapers.loader import available_plugins, get_resource_path, load_plugins
from scrapers.plugins.animeapi import AnimeApi
from services.repository import Repository


class TestDiscovery:
    """Test plugin discovery."""

    def test_resource_path_points_to_plugins(self):
        """Should resolve the plugins directory next to the loader."""
        assert Path(get_resource_path("plugins/")).is_dir()

    def test_animeapi_available(self):
        """Should find the AnimeApi plugin module."""
        assert "animeapi" in available_plugins()

    def test_package_init_skipped(self):
        """Should not treat __init__ as a plugin."""
        assert "__init__" not in available_plugins()


class TestLoadPlugins:
    """Test plugin loading and registration."""

    def test_load_registers_provider(self):
        """Should register AnimeApi for English."""
        load_plugins({"en"})
        assert Repository().get_provider("AnimeApi") is AnimeApi

    def test_language_filter(self):
        """Should skip plugins without a requested language."""
        load_plugins({"pt-br"})
        assert Repository().get_active_sources() == []

    def test_explicit_plugin_list(self):
        """Should load only the listed plugins."""
        load_plugins({"en"}, plugins=["animeapi"])
        assert Repository().get_active_sources() == ["AnimeApi"]

    def test_disabled_plugin(self, monkeypatch):
        """Should honour disabled_plugins from settings."""
        monkeypatch.setattr(settings.plugins, "disabled_plugins", ["animeapi"])
        load_plugins({"en"})
        assert Repository().get_active_sources() == []
