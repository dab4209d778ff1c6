"""
Theme pack models.

A theme pack is tokens plus per-context recipes. Packs authored against
the older single-context shape are a separate type (LegacyThemePack) and
only exist as normalizer input.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_taste.constants import PageContext, ThemeMode
from chuk_mcp_taste.models.recipes import NarrativeRecipes, OperationalRecipes
from chuk_mcp_taste.models.tokens import ThemeTokens


def theme_key(name: str) -> str:
    """Registry key for a theme name: lower-cased, whitespace collapsed to hyphens."""
    return re.sub(r"\s+", "-", name.lower())


class ThemeRecipes(BaseModel):
    """Recipes for both contexts."""

    operational: OperationalRecipes
    narrative: NarrativeRecipes

    model_config = {"frozen": True}

    def for_context(self, context: PageContext) -> OperationalRecipes | NarrativeRecipes:
        if context == PageContext.NARRATIVE:
            return self.narrative
        return self.operational


class ThemePack(BaseModel):
    """A normalized theme pack. Both contexts are always present."""

    name: str = Field(..., description="Theme name")
    mode: ThemeMode
    description: str = Field("", description="Theme description")
    tokens: ThemeTokens
    recipes_by_context: ThemeRecipes

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        return theme_key(self.name)

    @property
    def is_dark(self) -> bool:
        return self.mode == ThemeMode.DARK

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class LegacyThemePack(BaseModel):
    """A theme pack with a single, implicitly operational recipe set."""

    name: str
    mode: ThemeMode
    description: str = ""
    tokens: ThemeTokens
    recipes: OperationalRecipes = Field(default_factory=OperationalRecipes)

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        return theme_key(self.name)


class ThemeMetadata(BaseModel):
    """Lightweight metadata for listing themes."""

    key: str
    name: str
    mode: ThemeMode
    description: str

    model_config = {"frozen": True}

    @classmethod
    def from_theme(cls, theme: ThemePack) -> ThemeMetadata:
        """Create metadata from a theme pack."""
        return cls(
            key=theme.key,
            name=theme.name,
            mode=theme.mode,
            description=theme.description,
        )


def parse_theme_pack(data: dict[str, Any]) -> ThemePack | LegacyThemePack:
    """
    Parse a raw theme dictionary (from YAML or JSON) into a tagged pack.

    This is the only place the raw shape is inspected. A dictionary whose
    recipes_by_context holds both contexts is a ThemePack; anything else
    is a LegacyThemePack whose recipes come from recipes_by_context.operational
    or from recipes.

    Raises:
        pydantic.ValidationError: If the name, mode or tokens are invalid
    """
    by_context = data.get("recipes_by_context") or {}
    if PageContext.OPERATIONAL.value in by_context and PageContext.NARRATIVE.value in by_context:
        return ThemePack.model_validate(data)

    recipes = by_context.get(PageContext.OPERATIONAL.value)
    if recipes is None:
        recipes = data.get("recipes") or {}

    return LegacyThemePack.model_validate(
        {
            "name": data.get("name"),
            "mode": data.get("mode"),
            "description": data.get("description", ""),
            "tokens": data.get("tokens"),
            "recipes": recipes,
        }
    )
