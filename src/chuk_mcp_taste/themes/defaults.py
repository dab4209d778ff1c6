"""
Default recipes synthesized during normalization.

Each function is pure and total over ThemeMode: every field resolves
for both dark and light.
"""

from __future__ import annotations

from chuk_mcp_taste.constants import ThemeMode
from chuk_mcp_taste.models.recipes import (
    AccentUsageRecipe,
    BackgroundMotifRecipe,
    FeatureCardRecipe,
    FeaturesBinding,
    HeroBinding,
    HeroRecipe,
    HeroSpacing,
    IconSystemRecipe,
    LayoutRhythmRecipe,
    MediaRecipes,
    MetricRibbonRecipe,
    MotifLayer,
    MotifsRecipe,
    MotionBehavior,
    MotionBindingsRecipe,
    MotionDurations,
    MotionEasings,
    MotionRecipes,
    PlaceholderRecipe,
    SignalPathGradient,
    SignalPathRecipe,
    SignatureBlocksBinding,
    SignatureBlocksRecipe,
    StackedCardsRecipe,
    StoryboardRecipe,
    StoryboardSection,
    SurfaceRecipe,
)
from chuk_mcp_taste.models.tokens import ThemeTokens

EASE_STANDARD = "cubic-bezier(0.4, 0, 0.2, 1)"
EASE_EXIT = "cubic-bezier(0.4, 0, 1, 1)"
EASE_SPRING = "cubic-bezier(0.34, 1.56, 0.64, 1)"


def _is_dark(mode: ThemeMode | str) -> bool:
    # Raises ValueError for anything outside the enum
    return ThemeMode(mode) == ThemeMode.DARK


# =============================================================================
# MEDIA
# =============================================================================


def operational_media_recipes(mode: ThemeMode | str) -> MediaRecipes:
    """Icons, placeholders and motifs for the operational context."""
    dark = _is_dark(mode)
    return MediaRecipes(
        icon=IconSystemRecipe(
            default_size=16,
            compact_size=14,
            large_size=24,
            stroke_width=1.5,
            muted_opacity="0.5",
            color_mode="currentColor",
        ),
        placeholder=PlaceholderRecipe(
            style="skeleton",
            shimmer=True,
            shimmer_direction="ltr",
            base_color="surface-inset" if dark else "surface-2",
            highlight_color="surface",
            border_radius="var(--ds-radius-control)",
        ),
        background_motif=BackgroundMotifRecipe(
            hero_motif="none",
            motif_opacity="0",
            motif_color="border",
        ),
    )


def narrative_media_recipes(mode: ThemeMode | str) -> MediaRecipes:
    """Icons, placeholders and motifs for the narrative context."""
    dark = _is_dark(mode)
    return MediaRecipes(
        icon=IconSystemRecipe(
            default_size=20,
            compact_size=16,
            large_size=32,
            stroke_width=1.5,
            muted_opacity="0.6",
            color_mode="accent",
        ),
        placeholder=PlaceholderRecipe(
            style="blur" if dark else "skeleton",
            shimmer=not dark,
            shimmer_direction="ltr",
            base_color="surface/50" if dark else "surface-2",
            highlight_color="accent/10" if dark else "surface",
            border_radius="var(--ds-radius-surface)",
        ),
        background_motif=BackgroundMotifRecipe(
            hero_motif="radialGlow" if dark else "dots",
            motif_spacing="32px",
            motif_opacity="0.15" if dark else "0.08",
            motif_color="accent" if dark else "border",
        ),
    )


# =============================================================================
# MOTION
# =============================================================================


def operational_motion_recipes() -> MotionRecipes:
    return MotionRecipes(
        durations=MotionDurations(instant=50, fast=150, normal=200, slow=300, deliberate=500),
        easings=MotionEasings(
            default=EASE_STANDARD,
            enter="cubic-bezier(0, 0, 0.2, 1)",
            exit=EASE_EXIT,
            spring=EASE_SPRING,
        ),
        behavior=MotionBehavior(
            enabled=True,
            loading_style="shimmer",
            hover_transition="fast",
            entrance_animation="none",
            stagger_delay=0,
        ),
    )


def narrative_motion_recipes() -> MotionRecipes:
    return MotionRecipes(
        durations=MotionDurations(instant=50, fast=200, normal=300, slow=500, deliberate=800),
        easings=MotionEasings(
            default=EASE_STANDARD,
            enter="cubic-bezier(0.22, 1, 0.36, 1)",
            exit=EASE_EXIT,
            spring=EASE_SPRING,
        ),
        behavior=MotionBehavior(
            enabled=True,
            loading_style="pulse",
            hover_transition="normal",
            entrance_animation="slideUp",
            stagger_delay=50,
        ),
    )


# =============================================================================
# NARRATIVE SURFACES AND LAYOUT
# =============================================================================


def hero_surface() -> SurfaceRecipe:
    return SurfaceRecipe(
        border=False,
        border_opacity="0",
        shadow=False,
        gradient=True,
        gradient_direction="to bottom",
        background="transparent",
    )


def hero_recipe(mode: ThemeMode | str) -> HeroRecipe:
    return HeroRecipe(
        title_size="3.5rem",
        title_weight="700",
        title_tracking="-0.03em",
        title_max_width="800px",
        subtitle_size="1.25rem",
        subtitle_opacity="0.7",
        subtitle_max_width="600px",
        spacing=HeroSpacing(padding_y="80px", gap="24px"),
        accent_gradient=_is_dark(mode),
    )


def feature_card_recipe(mode: ThemeMode | str) -> FeatureCardRecipe:
    return FeatureCardRecipe(
        style="glass" if _is_dark(mode) else "elevated",
        icon_style="accent",
        hover_effect="lift",
    )


def layout_rhythm_recipe() -> LayoutRhythmRecipe:
    return LayoutRhythmRecipe(section_gap="120px", hero_bottom_gap="80px", feature_gap="32px")


def accent_usage_recipe(mode: ThemeMode | str, tokens: ThemeTokens) -> AccentUsageRecipe:
    """Accent rules for narrative pages; the background gradient derives from the accent tokens."""
    if _is_dark(mode):
        gradient = f"linear-gradient(135deg, hsl({tokens.accent} / 0.15), transparent)"
    else:
        gradient = f"linear-gradient(135deg, hsl({tokens.accent_muted}), transparent)"
    return AccentUsageRecipe(
        gradient_allowed=True,
        text_emphasis_allowed=True,
        background_gradient=gradient,
    )


# =============================================================================
# NARRATIVE-ONLY RECIPES
# =============================================================================


def motifs_recipe(mode: ThemeMode | str) -> MotifsRecipe:
    """Layered background motifs: grid, glow field, noise."""
    dark = _is_dark(mode)
    return MotifsRecipe(
        layers=[
            MotifLayer(
                type="grid",
                opacity=0.03 if dark else 0.02,
                color="accent" if dark else "border",
                scale=1,
                animate="none",
                z_index=0,
            ),
            MotifLayer(
                type="glowField",
                opacity=0.15 if dark else 0.08,
                color="accent",
                blur=120,
                scale=1.5,
                animate="breathe",
                z_index=1,
            ),
            MotifLayer(
                type="noise",
                opacity=0.02 if dark else 0.015,
                color="text",
                scale=1,
                animate="none",
                z_index=2,
            ),
        ],
        intensity=1,
        audience_overrides={
            "hotel-owner": [
                MotifLayer(type="glowField", opacity=0.18 if dark else 0.1, color="accent"),
            ],
            "developer": [
                MotifLayer(type="grid", opacity=0.05 if dark else 0.03),
                MotifLayer(type="signalPaths", opacity=0.08 if dark else 0.04, color="accent"),
            ],
        },
    )


def storyboard_recipe() -> StoryboardRecipe:
    """Section order for narrative pages. Identical for both modes."""
    return StoryboardRecipe(
        sections=[
            StoryboardSection(
                type="hero",
                id="hero",
                motion="fadeUp",
                with_motifs=True,
                signature_block="SignalPathGraphic",
            ),
            StoryboardSection(type="narrative2", id="narrative", motion="fadeUp", with_motifs=False),
            StoryboardSection(type="proof3", id="proof", motion="fadeUp", with_motifs=False),
            StoryboardSection(
                type="banner",
                id="metrics",
                motion="slideIn",
                with_motifs=False,
                signature_block="MetricRibbon",
            ),
            StoryboardSection(
                type="stackedCards",
                id="cards",
                motion="fadeUp",
                with_motifs=False,
                signature_block="StackedCards",
            ),
            StoryboardSection(type="cta", id="cta", motion="fadeUp", with_motifs=True),
        ],
        audience_overrides={
            "hotel-owner": ["hero", "narrative", "metrics", "proof", "cards", "cta"],
            "developer": ["hero", "proof", "narrative", "cards", "metrics", "cta"],
        },
    )


def signature_blocks_recipe(mode: ThemeMode | str) -> SignatureBlocksRecipe:
    dark = _is_dark(mode)
    return SignatureBlocksRecipe(
        signal_path=True,
        stacked_cards=True,
        metric_ribbon=True,
        signal_path_config=SignalPathRecipe(
            stroke_color="accent",
            stroke_opacity=0.4 if dark else 0.25,
            stroke_width=1.5,
            node_color="accent",
            node_glow=dark,
            blur=8 if dark else 4,
            gradient=SignalPathGradient(
                from_color="accent",
                to_color="accent-secondary",
                direction="135deg",
            ),
            animate_on_scroll=True,
            complexity="medium",
        ),
        stacked_cards_config=StackedCardsRecipe(
            rotation_range=6,
            shadow_depth="dramatic" if dark else "medium",
            border_style="subtle",
            hover_effect="lift",
            visible_cards=3,
            stack_direction="right",
        ),
        metric_ribbon_config=MetricRibbonRecipe(
            background="surface" if dark else "accent-muted",
            separator="line",
            value_style="gradient" if dark else "bold",
            label_style="muted",
            count=4,
        ),
    )


def motion_bindings_recipe() -> MotionBindingsRecipe:
    return MotionBindingsRecipe(
        hero=HeroBinding(entrance="fadeUp", motif_animation="breathe"),
        features=FeaturesBinding(entrance="stagger", stagger_delay=100),
        signature_blocks=SignatureBlocksBinding(
            signal_path="draw",
            stacked_cards="cascade",
            metric_ribbon="countUp",
        ),
    )
