"""
Pydantic models for the taste engine.

This module provides:
- ThemeTokens: Color, typography and density primitives
- OperationalRecipes / NarrativeRecipes: Per-context recipe sets
- ThemePack / LegacyThemePack: Current and single-context theme shapes
- TunerValues / StyleOverrides: Tuner input and computed deltas
- TasteProfile / TasteObservation: Taste blending input and output
"""

from chuk_mcp_taste.models.recipes import (
    NarrativeRecipes,
    OperationalRecipes,
    RecipeSet,
    SurfaceRecipe,
)
from chuk_mcp_taste.models.taste import TasteObservation, TasteProfile, TasteSource
from chuk_mcp_taste.models.theme import (
    LegacyThemePack,
    ThemeMetadata,
    ThemePack,
    ThemeRecipes,
    parse_theme_pack,
    theme_key,
)
from chuk_mcp_taste.models.tokens import DensityTokens, ThemeTokens, TypeScale, TypeScaleToken
from chuk_mcp_taste.models.tuners import StyleOverrides, TunerValues

__all__ = [
    "DensityTokens",
    "LegacyThemePack",
    "NarrativeRecipes",
    "OperationalRecipes",
    "RecipeSet",
    "StyleOverrides",
    "SurfaceRecipe",
    "TasteObservation",
    "TasteProfile",
    "TasteSource",
    "ThemeMetadata",
    "ThemePack",
    "ThemeRecipes",
    "ThemeTokens",
    "TunerValues",
    "TypeScale",
    "TypeScaleToken",
    "parse_theme_pack",
    "theme_key",
]
