"""
Theme system - theme packs, normalization, lookup and application.

Themes are design tokens plus per-context recipes. The same tokens behave
differently on operational pages (dense, restrained) and narrative pages
(expressive, storytelling).
"""

from chuk_mcp_taste.themes.applier import (
    AppliedState,
    InMemorySurface,
    StyleSurface,
    ThemeApplier,
    ThemeChangeEvent,
    style_parameters,
)
from chuk_mcp_taste.themes.normalizer import normalize_theme_pack
from chuk_mcp_taste.themes.registry import ThemeRegistry
from chuk_mcp_taste.themes.resolver import coerce_context, get_recipe, resolve_recipes

__all__ = [
    "AppliedState",
    "InMemorySurface",
    "StyleSurface",
    "ThemeApplier",
    "ThemeChangeEvent",
    "ThemeRegistry",
    "coerce_context",
    "get_recipe",
    "normalize_theme_pack",
    "resolve_recipes",
    "style_parameters",
]
