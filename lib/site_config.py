"""Site configuration for the FileLens docs app.

Reads site.toml (title, docs directory, navigation order, log level).
Missing or unreadable config falls back to built-in defaults so the docs
still render.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_ENV_VAR = "FILELENS_DOCS_CONFIG"


class SiteConfig:
    """Loader and accessors for site.toml settings."""

    def __init__(self, config_file: Optional[str] = None):
        """Initialize the site config.

        Args:
            config_file: Path to site.toml. If None, uses $FILELENS_DOCS_CONFIG
                or site.toml in the project root.
        """
        if config_file is None:
            config_file = os.environ.get(CONFIG_ENV_VAR, str(PROJECT_ROOT / "site.toml"))

        self.config_file = Path(config_file)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from site.toml, merged over the defaults.

        Returns:
            Configuration dictionary
        """
        config = self._default_config()

        if not self.config_file.exists():
            logger.warning(f"Site config not found, using defaults: {self.config_file}")
            return config

        try:
            with open(self.config_file, 'r') as f:
                loaded = toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            logger.error(f"Error reading site config {self.config_file}: {e}")
            return config

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values
        return config

    def _default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "site": {
                "title": "FileLens Docs",
                "icon": "📄",
                "docs_dir": "docs",
                "default_page": "index",
                "nav": [],
            },
            "logging": {
                "level": "INFO",
            },
        }

    @property
    def title(self) -> str:
        return str(self.config["site"].get("title", "FileLens Docs"))

    @property
    def icon(self) -> str:
        return str(self.config["site"].get("icon", "📄"))

    @property
    def docs_dir(self) -> Path:
        """Docs directory; relative paths resolve against the project root."""
        docs_dir = Path(self.config["site"].get("docs_dir", "docs"))
        if not docs_dir.is_absolute():
            docs_dir = PROJECT_ROOT / docs_dir
        return docs_dir

    @property
    def default_page(self) -> str:
        return str(self.config["site"].get("default_page", "index"))

    @property
    def nav(self) -> List[str]:
        """Page slugs in navigation order. Pages not listed follow alphabetically."""
        return [str(slug) for slug in self.config["site"].get("nav", [])]

    @property
    def log_level(self) -> int:
        """Logging level from config, INFO if the name is not recognised."""
        name = str(self.config["logging"].get("level", "INFO")).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO


# Global instance
site_config = SiteConfig()
