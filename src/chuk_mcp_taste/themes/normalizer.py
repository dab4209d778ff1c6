"""
Theme normalizer - upgrades single-context packs to the two-context shape.

Normalization is idempotent: a ThemePack comes back as the same object.
A LegacyThemePack keeps its recipes as the operational set, and the
narrative set is synthesized from them plus mode-dependent defaults.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel

from chuk_mcp_taste.models.recipes import (
    AppShellRecipe,
    NarrativeRecipes,
    NarrativeSurfaceGroup,
    OperationalRecipes,
    SectionHeaderRecipe,
    SectionSpacing,
    SurfaceRecipe,
)
from chuk_mcp_taste.models.theme import LegacyThemePack, ThemePack, ThemeRecipes
from chuk_mcp_taste.themes import defaults

RecipeT = TypeVar("RecipeT", bound=BaseModel)


def _derive(recipe: RecipeT | None, default: type[RecipeT], **changes: object) -> RecipeT:
    """Copy a recipe with changes applied, starting from an empty one if absent."""
    base = recipe if recipe is not None else default()
    return base.model_copy(update=changes)


def upgrade_operational(legacy: LegacyThemePack) -> OperationalRecipes:
    """Legacy recipes, with media and motion filled in when missing."""
    recipes = legacy.recipes
    updates: dict[str, object] = {}
    if recipes.media is None:
        updates["media"] = defaults.operational_media_recipes(legacy.mode)
    if recipes.motion is None:
        updates["motion"] = defaults.operational_motion_recipes()
    if not updates:
        return recipes
    return recipes.model_copy(update=updates)


def synthesize_narrative(legacy: LegacyThemePack) -> NarrativeRecipes:
    """Build the narrative recipe set from a legacy pack."""
    operational = legacy.recipes
    mode = legacy.mode

    app_shell = operational.app_shell
    treatment = "chronicle" if app_shell and app_shell.background_treatment == "chronicle" else "none"

    surface = operational.surface
    surface_group = NarrativeSurfaceGroup(
        default=_derive(surface.default if surface else None, SurfaceRecipe, border=False, gradient=True),
        hero=defaults.hero_surface(),
        feature=_derive(surface.floating if surface else None, SurfaceRecipe, gradient=False),
    )

    section_header = _derive(
        operational.section_header,
        SectionHeaderRecipe,
        style="centered",
        title_size="2.5rem",
        spacing=SectionSpacing(top="0", bottom="48px"),
    )

    return NarrativeRecipes(
        app_shell=_derive(app_shell, AppShellRecipe, background_treatment=treatment),
        surface=surface_group,
        hero=defaults.hero_recipe(mode),
        section_header=section_header,
        feature_card=defaults.feature_card_recipe(mode),
        accent_usage=defaults.accent_usage_recipe(mode, legacy.tokens),
        layout_rhythm=defaults.layout_rhythm_recipe(),
        media=defaults.narrative_media_recipes(mode),
        motion=defaults.narrative_motion_recipes(),
        motifs=defaults.motifs_recipe(mode),
        storyboard=defaults.storyboard_recipe(),
        signature_blocks=defaults.signature_blocks_recipe(mode),
        motion_bindings=defaults.motion_bindings_recipe(),
    )


def normalize_theme_pack(pack: ThemePack | LegacyThemePack) -> ThemePack:
    """
    Normalize a theme pack to the two-context shape.

    Args:
        pack: A current or legacy theme pack

    Returns:
        The pack itself if already normalized, otherwise an upgraded ThemePack
    """
    if isinstance(pack, ThemePack):
        return pack

    return ThemePack(
        name=pack.name,
        mode=pack.mode,
        description=pack.description,
        tokens=pack.tokens,
        recipes_by_context=ThemeRecipes(
            operational=upgrade_operational(pack),
            narrative=synthesize_narrative(pack),
        ),
    )
