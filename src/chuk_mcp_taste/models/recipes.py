"""
Recipe models - named behavioral settings, scoped to one usage context.

Recipe fields are optional: a recipe authored against an older shape may
lack nested fields, and absence (None) is carried through normalization
rather than rejected. Unknown keys are kept as extras.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field

_RECIPE_CONFIG = {"frozen": True, "extra": "allow"}


# =============================================================================
# SHARED RECIPES
# =============================================================================


class SurfaceRecipe(BaseModel):
    """Surface treatment: border, shadow, gradient."""

    border: bool | None = None
    border_opacity: str | None = None
    shadow: bool | None = None
    shadow_strength: str | None = None  # normal | strong
    gradient: bool | None = None
    gradient_direction: str | None = None
    gradient_from: str | None = None
    gradient_to: str | None = None
    background: str | None = None
    inner_highlight: bool | None = None
    inner_highlight_opacity: str | None = None

    model_config = _RECIPE_CONFIG


class AppShellRecipe(BaseModel):
    """Page shell background treatment."""

    background_treatment: str | None = None  # none | chronicle | gradient
    glow_color: str | None = None
    glow_opacity: str | None = None
    vignette_opacity: str | None = None

    model_config = _RECIPE_CONFIG


class SectionSpacing(BaseModel):
    top: str | None = None
    bottom: str | None = None

    model_config = _RECIPE_CONFIG


class SectionHeaderRecipe(BaseModel):
    style: str | None = None  # chronicle | clean | centered
    title_weight: str | None = None
    title_size: str | None = None
    subtitle_opacity: str | None = None
    subtitle_max_width: str | None = None
    spacing: SectionSpacing | None = None

    model_config = _RECIPE_CONFIG


class IconSystemRecipe(BaseModel):
    default_size: int | None = None
    compact_size: int | None = None
    large_size: int | None = None
    stroke_width: float | None = None
    muted_opacity: str | None = None
    color_mode: str | None = None  # currentColor | accent | muted

    model_config = _RECIPE_CONFIG


class PlaceholderRecipe(BaseModel):
    """Placeholder/loading state styling."""

    style: str | None = None  # skeleton | blur | pulse
    shimmer: bool | None = None
    shimmer_direction: str | None = None
    base_color: str | None = None
    highlight_color: str | None = None
    border_radius: str | None = None

    model_config = _RECIPE_CONFIG


class BackgroundMotifRecipe(BaseModel):
    hero_motif: str | None = None  # none | gridLines | dots | noise | radialGlow
    motif_spacing: str | None = None
    motif_opacity: str | None = None
    motif_color: str | None = None

    model_config = _RECIPE_CONFIG


class MediaRecipes(BaseModel):
    icon: IconSystemRecipe | None = None
    placeholder: PlaceholderRecipe | None = None
    background_motif: BackgroundMotifRecipe | None = None

    model_config = _RECIPE_CONFIG


class MotionDurations(BaseModel):
    """Duration presets in milliseconds."""

    instant: int | None = None
    fast: int | None = None
    normal: int | None = None
    slow: int | None = None
    deliberate: int | None = None

    model_config = _RECIPE_CONFIG


class MotionEasings(BaseModel):
    default: str | None = None
    enter: str | None = None
    exit: str | None = None
    spring: str | None = None

    model_config = _RECIPE_CONFIG


class MotionBehavior(BaseModel):
    enabled: bool | None = None
    loading_style: str | None = None  # shimmer | pulse | none
    hover_transition: str | None = None  # none | fast | normal
    entrance_animation: str | None = None  # none | fade | slideUp | scale
    stagger_delay: int | None = None

    model_config = _RECIPE_CONFIG


class MotionRecipes(BaseModel):
    durations: MotionDurations | None = None
    easings: MotionEasings | None = None
    behavior: MotionBehavior | None = None

    model_config = _RECIPE_CONFIG


# =============================================================================
# OPERATIONAL RECIPES
# =============================================================================


class SurfaceGroup(BaseModel):
    """Operational surface variants."""

    default: SurfaceRecipe | None = None
    inset: SurfaceRecipe | None = None
    floating: SurfaceRecipe | None = None

    model_config = _RECIPE_CONFIG


class StatCardRecipe(BaseModel):
    style: str | None = None  # minimal | clean | accent
    accent_mode: str | None = None  # none | single | perCard
    accent_element: str | None = None  # none | leftHairline | topBorder | dot
    accent_width: str | None = None
    primary_highlight: bool | None = None
    value_font_style: str | None = None
    label_font_style: str | None = None

    model_config = _RECIPE_CONFIG


class DataTableRecipe(BaseModel):
    density: str | None = None  # compact | comfortable
    header_style: str | None = None  # muted | muted-uppercase
    row_hover: str | None = None  # none | subtle
    separator_style: str | None = None  # none | faint | normal
    separator_opacity: str | None = None

    model_config = _RECIPE_CONFIG


class HeroHeaderSpacing(BaseModel):
    padding_y: str | None = None

    model_config = _RECIPE_CONFIG


class HeroHeaderRecipe(BaseModel):
    style: str | None = None
    title_size: str | None = None  # h1 | h2
    subtitle_muted: bool | None = None
    actions_grouped: bool | None = None
    spacing: HeroHeaderSpacing | None = None

    model_config = _RECIPE_CONFIG


class ActivityTableRecipe(BaseModel):
    density: str | None = None
    header_style: str | None = None
    header_tracking: str | None = None
    header_opacity: str | None = None
    row_hover: str | None = None
    row_hover_bg: str | None = None
    separator_opacity: str | None = None
    icon_bg: str | None = None
    icon_opacity: str | None = None
    amount_weight: str | None = None
    time_opacity: str | None = None
    container_bg: str | None = None
    container_border: bool | None = None
    container_border_opacity: str | None = None

    model_config = _RECIPE_CONFIG


class ToolbarRecipe(BaseModel):
    variant: str | None = None  # inset | surface
    height: str | None = None
    item_height: str | None = None
    item_padding: str | None = None
    gap: str | None = None
    separator_color: str | None = None
    separator_opacity: str | None = None
    separator_height: str | None = None

    model_config = _RECIPE_CONFIG


# =============================================================================
# NARRATIVE RECIPES
# =============================================================================


class NarrativeSurfaceGroup(BaseModel):
    """Narrative surface variants."""

    default: SurfaceRecipe | None = None
    hero: SurfaceRecipe | None = None
    feature: SurfaceRecipe | None = None

    model_config = _RECIPE_CONFIG


class HeroSpacing(BaseModel):
    padding_y: str | None = None
    gap: str | None = None

    model_config = _RECIPE_CONFIG


class HeroRecipe(BaseModel):
    title_size: str | None = None
    title_weight: str | None = None
    title_tracking: str | None = None
    title_max_width: str | None = None
    subtitle_size: str | None = None
    subtitle_opacity: str | None = None
    subtitle_max_width: str | None = None
    spacing: HeroSpacing | None = None
    accent_gradient: bool | None = None

    model_config = _RECIPE_CONFIG


class FeatureCardRecipe(BaseModel):
    style: str | None = None  # minimal | elevated | glass
    icon_style: str | None = None  # accent | muted | gradient
    hover_effect: str | None = None  # none | lift | glow

    model_config = _RECIPE_CONFIG


class AccentUsageRecipe(BaseModel):
    gradient_allowed: bool | None = None
    text_emphasis_allowed: bool | None = None
    background_gradient: str | None = None

    model_config = _RECIPE_CONFIG


class LayoutRhythmRecipe(BaseModel):
    section_gap: str | None = None
    hero_bottom_gap: str | None = None
    feature_gap: str | None = None

    model_config = _RECIPE_CONFIG


class MotifLayer(BaseModel):
    """One layered background motif."""

    type: str | None = None  # grid | noise | glowField | signalPaths | dots | radialGlow
    opacity: float | None = None
    color: str | None = None
    blur: float | None = None
    scale: float | None = None
    animate: str | None = None  # none | drift | pulse | breathe
    z_index: int | None = None

    model_config = _RECIPE_CONFIG


class MotifsRecipe(BaseModel):
    layers: list[MotifLayer] = Field(default_factory=list)
    intensity: float | None = None
    audience_overrides: dict[str, list[MotifLayer]] = Field(
        default_factory=dict,
        description="Per-audience partial layer overrides",
    )

    model_config = _RECIPE_CONFIG


class StoryboardSection(BaseModel):
    type: str | None = None  # hero | narrative2 | proof3 | banner | stackedCards | cta ...
    id: str | None = None
    motion: str | None = None  # none | fadeUp | slideIn | scale
    with_motifs: bool | None = None
    signature_block: str | None = None

    model_config = _RECIPE_CONFIG


class StoryboardRecipe(BaseModel):
    sections: list[StoryboardSection] = Field(default_factory=list)
    audience_overrides: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Per-audience section id ordering",
    )

    model_config = _RECIPE_CONFIG


class SignalPathGradient(BaseModel):
    from_color: str | None = Field(default=None, alias="from")
    to_color: str | None = Field(default=None, alias="to")
    direction: str | None = None

    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}


class SignalPathRecipe(BaseModel):
    stroke_color: str | None = None
    stroke_opacity: float | None = None
    stroke_width: float | None = None
    node_color: str | None = None
    node_glow: bool | None = None
    blur: float | None = None
    gradient: SignalPathGradient | None = None
    animate_on_scroll: bool | None = None
    complexity: str | None = None  # simple | medium | complex

    model_config = _RECIPE_CONFIG


class StackedCardsRecipe(BaseModel):
    rotation_range: float | None = None
    shadow_depth: str | None = None  # subtle | medium | dramatic
    border_style: str | None = None  # none | subtle | accent
    hover_effect: str | None = None  # none | lift | tilt | fan
    visible_cards: int | None = None
    stack_direction: str | None = None  # left | right | center

    model_config = _RECIPE_CONFIG


class MetricRibbonRecipe(BaseModel):
    background: str | None = None  # transparent | surface | accent-muted | gradient
    separator: str | None = None  # none | line | dot
    value_style: str | None = None  # bold | light | gradient
    label_style: str | None = None  # muted | normal
    count: int | None = None

    model_config = _RECIPE_CONFIG


class SignatureBlocksRecipe(BaseModel):
    signal_path: bool | None = None
    stacked_cards: bool | None = None
    metric_ribbon: bool | None = None
    signal_path_config: SignalPathRecipe | None = None
    stacked_cards_config: StackedCardsRecipe | None = None
    metric_ribbon_config: MetricRibbonRecipe | None = None

    model_config = _RECIPE_CONFIG


class HeroBinding(BaseModel):
    entrance: str | None = None  # none | fadeUp | scale
    motif_animation: str | None = None  # none | drift | breathe

    model_config = _RECIPE_CONFIG


class FeaturesBinding(BaseModel):
    entrance: str | None = None  # none | fadeUp | stagger
    stagger_delay: int | None = None

    model_config = _RECIPE_CONFIG


class SignatureBlocksBinding(BaseModel):
    signal_path: str | None = None  # none | draw | pulse
    stacked_cards: str | None = None  # none | cascade | fan
    metric_ribbon: str | None = None  # none | countUp | slideIn

    model_config = _RECIPE_CONFIG


class MotionBindingsRecipe(BaseModel):
    """Which motion plays on which narrative element."""

    hero: HeroBinding | None = None
    features: FeaturesBinding | None = None
    signature_blocks: SignatureBlocksBinding | None = None

    model_config = _RECIPE_CONFIG


# =============================================================================
# RECIPE SETS
# =============================================================================


def recipe_field_name(name: str) -> str:
    """Convert a display name ('StatCard', 'motionBindings') to its field name."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name.strip()).lower()


class RecipeSet(BaseModel):
    """
    A named collection of recipes for one context.

    Recipes are looked up by name, never iterated positionally.
    """

    model_config = _RECIPE_CONFIG

    def get(self, name: str) -> Any | None:
        """
        Look up a recipe by name.

        Accepts the field name ('stat_card') or the display name ('StatCard').

        Returns:
            The recipe, or None if absent
        """
        field = recipe_field_name(name)
        if field in type(self).model_fields:
            return getattr(self, field)
        extras = self.model_extra or {}
        return extras.get(name, extras.get(field))

    def names(self) -> list[str]:
        """Names of all populated recipes."""
        populated = [
            field for field in type(self).model_fields if getattr(self, field) is not None
        ]
        return populated + list((self.model_extra or {}).keys())


class OperationalRecipes(RecipeSet):
    """Operational context recipes - dense, restrained."""

    app_shell: AppShellRecipe | None = None
    surface: SurfaceGroup | None = None
    stat_card: StatCardRecipe | None = None
    section_header: SectionHeaderRecipe | None = None
    data_table: DataTableRecipe | None = None
    hero_header: HeroHeaderRecipe | None = None
    activity_table: ActivityTableRecipe | None = None
    toolbar: ToolbarRecipe | None = None
    media: MediaRecipes | None = None
    motion: MotionRecipes | None = None


class NarrativeRecipes(RecipeSet):
    """Narrative context recipes - expressive, storytelling."""

    app_shell: AppShellRecipe | None = None
    surface: NarrativeSurfaceGroup | None = None
    hero: HeroRecipe | None = None
    section_header: SectionHeaderRecipe | None = None
    feature_card: FeatureCardRecipe | None = None
    accent_usage: AccentUsageRecipe | None = None
    layout_rhythm: LayoutRhythmRecipe | None = None
    media: MediaRecipes | None = None
    motion: MotionRecipes | None = None
    motifs: MotifsRecipe | None = None
    storyboard: StoryboardRecipe | None = None
    signature_blocks: SignatureBlocksRecipe | None = None
    motion_bindings: MotionBindingsRecipe | None = None
