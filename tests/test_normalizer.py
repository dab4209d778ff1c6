"""
Tests for theme normalization and the default recipe functions.
"""

import pytest
from conftest import make_legacy_data

from chuk_mcp_taste.constants import ThemeMode
from chuk_mcp_taste.models import LegacyThemePack, NarrativeRecipes, ThemePack, parse_theme_pack
from chuk_mcp_taste.models.recipes import MediaRecipes, MotionRecipes
from chuk_mcp_taste.themes import defaults
from chuk_mcp_taste.themes.normalizer import normalize_theme_pack

MODES = [ThemeMode.DARK, ThemeMode.LIGHT]


def _assert_no_none(model, path: str = "") -> None:
    """Recursively assert every field of a recipe model is populated."""
    for name in type(model).model_fields:
        value = getattr(model, name)
        assert value is not None, f"{path}{name} is None"
        if hasattr(type(value), "model_fields"):
            _assert_no_none(value, f"{path}{name}.")


class TestDefaults:
    """Default recipe functions are total over both modes."""

    @pytest.mark.parametrize("mode", MODES)
    def test_operational_media_complete(self, mode: ThemeMode):
        """Operational media defaults fill every field except motif spacing."""
        media = defaults.operational_media_recipes(mode)
        _assert_no_none(media.icon)
        _assert_no_none(media.placeholder)
        assert media.background_motif.hero_motif == "none"

    @pytest.mark.parametrize("mode", MODES)
    def test_narrative_media_complete(self, mode: ThemeMode):
        """Narrative media defaults fill every field."""
        _assert_no_none(defaults.narrative_media_recipes(mode))

    def test_media_differs_by_mode(self):
        """Dark narrative placeholders blur; light ones shimmer."""
        dark = defaults.narrative_media_recipes(ThemeMode.DARK)
        light = defaults.narrative_media_recipes(ThemeMode.LIGHT)
        assert dark.placeholder.style == "blur"
        assert dark.placeholder.shimmer is False
        assert light.placeholder.style == "skeleton"
        assert light.placeholder.shimmer is True
        assert dark.background_motif.hero_motif == "radialGlow"
        assert light.background_motif.hero_motif == "dots"

    def test_mode_accepts_string(self):
        """Modes may be given as plain strings."""
        media = defaults.operational_media_recipes("dark")
        assert media.placeholder.base_color == "surface-inset"

    def test_unknown_mode_rejected(self):
        """Modes outside the enum raise ValueError."""
        with pytest.raises(ValueError):
            defaults.hero_recipe("sepia")

    def test_motion_complete(self):
        """Motion defaults are fully populated."""
        _assert_no_none(defaults.operational_motion_recipes())
        _assert_no_none(defaults.narrative_motion_recipes())

    def test_narrative_motion_is_slower(self):
        """Narrative durations are at least as long as operational ones."""
        operational = defaults.operational_motion_recipes().durations
        narrative = defaults.narrative_motion_recipes().durations
        assert narrative.normal > operational.normal
        assert narrative.deliberate > operational.deliberate

    @pytest.mark.parametrize("mode", MODES)
    def test_hero_recipe(self, mode: ThemeMode):
        """Hero accent gradient is on for dark only."""
        hero = defaults.hero_recipe(mode)
        _assert_no_none(hero)
        assert hero.accent_gradient is (mode == ThemeMode.DARK)

    @pytest.mark.parametrize(
        ("mode", "style"), [(ThemeMode.DARK, "glass"), (ThemeMode.LIGHT, "elevated")]
    )
    def test_feature_card_style(self, mode: ThemeMode, style: str):
        """Feature cards are glass on dark, elevated on light."""
        assert defaults.feature_card_recipe(mode).style == style

    def test_accent_usage_gradient(self, tokens):
        """Dark gradients use the accent with alpha; light ones use accent_muted."""
        dark = defaults.accent_usage_recipe(ThemeMode.DARK, tokens)
        light = defaults.accent_usage_recipe(ThemeMode.LIGHT, tokens)
        assert dark.background_gradient == (
            f"linear-gradient(135deg, hsl({tokens.accent} / 0.15), transparent)"
        )
        assert light.background_gradient == (
            f"linear-gradient(135deg, hsl({tokens.accent_muted}), transparent)"
        )
        assert dark.gradient_allowed is True

    @pytest.mark.parametrize("mode", MODES)
    def test_motifs(self, mode: ThemeMode):
        """Three motif layers with audience overrides."""
        motifs = defaults.motifs_recipe(mode)
        assert [layer.type for layer in motifs.layers] == ["grid", "glowField", "noise"]
        assert [layer.z_index for layer in motifs.layers] == [0, 1, 2]
        assert set(motifs.audience_overrides) == {"hotel-owner", "developer"}

    def test_motifs_stronger_on_dark(self):
        """Dark motif layers are more opaque than light ones."""
        dark = defaults.motifs_recipe(ThemeMode.DARK).layers
        light = defaults.motifs_recipe(ThemeMode.LIGHT).layers
        for dark_layer, light_layer in zip(dark, light):
            assert dark_layer.opacity > light_layer.opacity

    def test_storyboard(self):
        """Storyboard overrides only reference known section ids."""
        storyboard = defaults.storyboard_recipe()
        ids = {section.id for section in storyboard.sections}
        assert len(storyboard.sections) == 6
        for order in storyboard.audience_overrides.values():
            assert set(order) == ids

    @pytest.mark.parametrize("mode", MODES)
    def test_signature_blocks(self, mode: ThemeMode):
        """Signature blocks are fully configured for both modes."""
        blocks = defaults.signature_blocks_recipe(mode)
        _assert_no_none(blocks)
        assert blocks.signal_path_config.node_glow is (mode == ThemeMode.DARK)

    def test_motion_bindings(self):
        """Motion bindings are fully configured."""
        _assert_no_none(defaults.motion_bindings_recipe())

    def test_layout_rhythm_and_hero_surface(self):
        """Mode-independent defaults are complete."""
        _assert_no_none(defaults.layout_rhythm_recipe())
        surface = defaults.hero_surface()
        assert surface.gradient is True
        assert surface.border is False


class TestNormalizeLegacy:
    """Upgrading legacy packs."""

    def test_returns_theme_pack(self, legacy_dark: LegacyThemePack):
        """Legacy packs become ThemePacks."""
        theme = normalize_theme_pack(legacy_dark)
        assert isinstance(theme, ThemePack)
        assert theme.name == legacy_dark.name
        assert theme.tokens == legacy_dark.tokens

    def test_operational_keeps_legacy_recipes(self, legacy_dark: LegacyThemePack):
        """Legacy recipes become the operational set verbatim."""
        operational = normalize_theme_pack(legacy_dark).recipes_by_context.operational
        assert operational.stat_card == legacy_dark.recipes.stat_card
        assert operational.surface == legacy_dark.recipes.surface

    def test_operational_media_and_motion_filled(self, legacy_dark: LegacyThemePack):
        """Missing media and motion are filled with operational defaults."""
        operational = normalize_theme_pack(legacy_dark).recipes_by_context.operational
        assert operational.media == defaults.operational_media_recipes(ThemeMode.DARK)
        assert operational.motion == defaults.operational_motion_recipes()

    def test_existing_media_kept(self):
        """Media already present in a legacy pack is not replaced."""
        pack = parse_theme_pack(
            make_legacy_data(recipes={"media": {"icon": {"default_size": 18}}})
        )
        operational = normalize_theme_pack(pack).recipes_by_context.operational
        assert operational.media.icon.default_size == 18
        assert operational.media.placeholder is None
        assert isinstance(operational.motion, MotionRecipes)

    def test_chronicle_treatment_carries_over(self, legacy_dark: LegacyThemePack):
        """A chronicle app shell stays chronicle in narrative."""
        narrative = normalize_theme_pack(legacy_dark).recipes_by_context.narrative
        assert narrative.app_shell.background_treatment == "chronicle"
        assert narrative.app_shell.glow_opacity == "0.1"

    def test_other_treatment_becomes_none(self):
        """Any other app shell treatment becomes none in narrative."""
        pack = parse_theme_pack(
            make_legacy_data(recipes={"app_shell": {"background_treatment": "gradient"}})
        )
        narrative = normalize_theme_pack(pack).recipes_by_context.narrative
        assert narrative.app_shell.background_treatment == "none"

    def test_narrative_surfaces(self, legacy_dark: LegacyThemePack):
        """Narrative surfaces derive from operational ones."""
        narrative = normalize_theme_pack(legacy_dark).recipes_by_context.narrative
        assert narrative.surface.default.border is False
        assert narrative.surface.default.gradient is True
        assert narrative.surface.default.border_opacity == "0.5"
        assert narrative.surface.hero == defaults.hero_surface()
        assert narrative.surface.feature.gradient is False
        assert narrative.surface.feature.shadow is True

    def test_narrative_section_header(self, legacy_dark: LegacyThemePack):
        """Section headers are centered and larger in narrative."""
        header = normalize_theme_pack(legacy_dark).recipes_by_context.narrative.section_header
        assert header.style == "centered"
        assert header.title_size == "2.5rem"
        assert header.title_weight == "600"
        assert header.spacing.top == "0"
        assert header.spacing.bottom == "48px"

    def test_narrative_only_recipes(self, legacy_dark: LegacyThemePack):
        """Motifs, storyboard, signature blocks and bindings are synthesized."""
        narrative = normalize_theme_pack(legacy_dark).recipes_by_context.narrative
        assert narrative.motifs == defaults.motifs_recipe(ThemeMode.DARK)
        assert narrative.storyboard == defaults.storyboard_recipe()
        assert narrative.signature_blocks == defaults.signature_blocks_recipe(ThemeMode.DARK)
        assert narrative.motion_bindings == defaults.motion_bindings_recipe()

    def test_accent_usage_uses_tokens(self, legacy_dark: LegacyThemePack):
        """The narrative accent gradient comes from the pack's accent token."""
        narrative = normalize_theme_pack(legacy_dark).recipes_by_context.narrative
        assert legacy_dark.tokens.accent in narrative.accent_usage.background_gradient


class TestNormalizeTotality:
    """Minimal legacy input still yields both contexts."""

    @pytest.mark.parametrize("mode", ["dark", "light"])
    def test_minimal_pack_populates_both_contexts(self, mode: str):
        """Every narrative recipe is present even with no operational recipes."""
        pack = parse_theme_pack(make_legacy_data(mode=mode))
        theme = normalize_theme_pack(pack)

        narrative = theme.recipes_by_context.narrative
        for name in NarrativeRecipes.model_fields:
            assert getattr(narrative, name) is not None, name

        operational = theme.recipes_by_context.operational
        assert isinstance(operational.media, MediaRecipes)
        assert isinstance(operational.motion, MotionRecipes)
        assert operational.stat_card is None

    def test_storyboard_and_bindings_shared_across_modes(self):
        """Dark and light packs get the same storyboard and motion bindings."""
        dark = normalize_theme_pack(parse_theme_pack(make_legacy_data(mode="dark")))
        light = normalize_theme_pack(parse_theme_pack(make_legacy_data(mode="light")))
        dark_narrative = dark.recipes_by_context.narrative
        light_narrative = light.recipes_by_context.narrative
        assert dark_narrative.storyboard == light_narrative.storyboard
        assert dark_narrative.motion_bindings == light_narrative.motion_bindings

    def test_minimal_light_values(self, legacy_light_minimal: LegacyThemePack):
        """Synthesized recipes follow the light mode."""
        narrative = normalize_theme_pack(legacy_light_minimal).recipes_by_context.narrative
        assert narrative.feature_card.style == "elevated"
        assert narrative.hero.accent_gradient is False
        assert narrative.app_shell.background_treatment == "none"
        assert narrative.surface.default.border is False


class TestNormalizeIdempotence:
    """Normalizing twice changes nothing."""

    def test_current_pack_returned_unchanged(self, legacy_dark: LegacyThemePack):
        """A normalized pack is returned as-is."""
        theme = normalize_theme_pack(legacy_dark)
        assert normalize_theme_pack(theme) is theme

    @pytest.mark.parametrize("mode", ["dark", "light"])
    def test_idempotent(self, mode: str):
        """normalize(normalize(x)) == normalize(x)."""
        pack = parse_theme_pack(make_legacy_data(mode=mode, recipes={"toolbar": {"gap": "4px"}}))
        once = normalize_theme_pack(pack)
        assert normalize_theme_pack(once) == once

    def test_deterministic(self, legacy_dark: LegacyThemePack):
        """Normalizing the same legacy pack twice gives equal results."""
        assert normalize_theme_pack(legacy_dark) == normalize_theme_pack(legacy_dark)
