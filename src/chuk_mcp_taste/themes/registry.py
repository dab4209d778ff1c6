"""
Theme registry - normalized theme packs addressed by key.

Themes can come from:
1. Built-in library (shipped with package)
2. Project themes (user's project/themes directory)
3. Packs registered directly in code
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from chuk_mcp_taste.models.theme import (
    LegacyThemePack,
    ThemeMetadata,
    ThemePack,
    parse_theme_pack,
    theme_key,
)
from chuk_mcp_taste.themes.normalizer import normalize_theme_pack

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


class ThemeRegistry:
    """
    Stores normalized theme packs by key.

    Keys are derived from theme names with theme_key(), so lookups are
    case-insensitive and treat whitespace and hyphens alike. Registering
    a second pack under the same key replaces the first.
    """

    def __init__(self) -> None:
        self._themes: dict[str, ThemePack] = {}

    @classmethod
    def with_library(
        cls,
        project_path: Path | None = None,
        library_path: Path | None = None,
    ) -> ThemeRegistry:
        """
        Create a registry preloaded with the built-in themes.

        Project themes override library themes with the same key.

        Args:
            project_path: Path to project themes directory
            library_path: Path to built-in theme library

        Returns:
            A populated registry
        """
        registry = cls()
        registry.register_directory(library_path or LIBRARY_PATH)
        if project_path:
            registry.register_directory(project_path)
        return registry

    def register(self, pack: ThemePack | LegacyThemePack) -> ThemePack:
        """
        Normalize and store a theme pack.

        Args:
            pack: A current or legacy theme pack

        Returns:
            The normalized pack as stored
        """
        theme = normalize_theme_pack(pack)
        self._themes[theme.key] = theme
        logger.debug(f"Registered theme '{theme.key}'")
        return theme

    def load(self, name: str) -> ThemePack | None:
        """
        Get a theme by name.

        Args:
            name: Theme name or key ('Chronicle Dark' and 'chronicle-dark' match)

        Returns:
            ThemePack if found, None otherwise
        """
        theme = self._themes.get(theme_key(name))
        if theme is None:
            logger.warning(f"Theme '{name}' not found. Available: {', '.join(self._themes)}")
        return theme

    def list_names(self) -> list[str]:
        """Registered keys in first-registration order."""
        return list(self._themes)

    def list_themes(self) -> list[ThemeMetadata]:
        """Metadata for every registered theme."""
        return [ThemeMetadata.from_theme(theme) for theme in self._themes.values()]

    def register_file(self, path: Path) -> ThemePack | None:
        """
        Load and register a theme from a YAML file.

        Args:
            path: Path to a theme YAML file

        Returns:
            The registered pack, or None if the file could not be loaded
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            pack = parse_theme_pack(data)
        except Exception as e:
            logger.warning(f"Skipping theme file {path}: {e}")
            return None
        return self.register(pack)

    def register_directory(self, path: Path) -> int:
        """
        Register every *.yaml theme in a directory, in file name order.

        Args:
            path: Directory to scan

        Returns:
            Number of themes registered
        """
        if not path.exists():
            return 0
        count = 0
        for file in sorted(path.glob("*.yaml")):
            if self.register_file(file) is not None:
                count += 1
        return count

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and theme_key(name) in self._themes

    def __len__(self) -> int:
        return len(self._themes)
