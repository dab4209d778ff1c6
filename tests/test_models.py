"""
Tests for the taste engine models.

Tests cover:
- Token validation and canonical ordering
- Recipe lookup by field and display name
- Theme pack parsing (current vs legacy shape)
- Tuner and taste profile models
"""

import pytest
from conftest import make_legacy_data, make_tokens_data
from pydantic import ValidationError

from chuk_mcp_taste.constants import ColorTemperature, PageContext, ThemeMode
from chuk_mcp_taste.models import (
    LegacyThemePack,
    OperationalRecipes,
    TasteObservation,
    TasteProfile,
    ThemeMetadata,
    ThemePack,
    ThemeTokens,
    TunerValues,
    parse_theme_pack,
    theme_key,
)
from chuk_mcp_taste.models.recipes import SignalPathGradient, recipe_field_name
from chuk_mcp_taste.themes import normalize_theme_pack


class TestThemeKey:
    """Tests for theme_key."""

    def test_lowercases_and_hyphenates(self):
        """Spaces become hyphens, letters are lower-cased."""
        assert theme_key("Chronicle Dark") == "chronicle-dark"

    def test_collapses_whitespace(self):
        """Runs of whitespace collapse to a single hyphen."""
        assert theme_key("Ops   Calm\tTheme") == "ops-calm-theme"

    def test_key_is_stable(self):
        """A key maps to itself."""
        assert theme_key("ops-calm") == "ops-calm"


class TestThemeTokens:
    """Tests for ThemeTokens."""

    def test_complete_tokens_validate(self):
        """A complete token dictionary validates."""
        tokens = ThemeTokens.model_validate(make_tokens_data())
        assert tokens.accent == "180 60% 40%"
        assert tokens.type_scale.label.text_transform == "uppercase"

    def test_missing_color_rejected(self):
        """Partial tokens fail at the boundary."""
        data = make_tokens_data()
        del data["ring"]
        with pytest.raises(ValidationError):
            ThemeTokens.model_validate(data)

    def test_missing_type_step_rejected(self):
        """Every type step is required."""
        data = make_tokens_data()
        del data["type_scale"]["kpi_compact"]
        with pytest.raises(ValidationError):
            ThemeTokens.model_validate(data)

    def test_type_steps_in_canonical_order(self):
        """Type steps come out in declaration order with kebab names."""
        tokens = ThemeTokens.model_validate(make_tokens_data())
        names = [name for name, _ in tokens.type_scale.steps()]
        assert names == ["h1", "h2", "h3", "body", "kpi", "kpi-compact", "label"]

    def test_density_dimensions_kebab_case(self):
        """Density dimensions use kebab-case names."""
        tokens = ThemeTokens.model_validate(make_tokens_data())
        names = [name for name, _ in tokens.density.dimensions()]
        assert names[0] == "table-row-height"
        assert "control-height-sm" in names
        assert len(names) == 8

    def test_tokens_are_frozen(self):
        """Tokens are immutable."""
        tokens = ThemeTokens.model_validate(make_tokens_data())
        with pytest.raises(ValidationError):
            tokens.accent = "0 0% 0%"


class TestRecipeSet:
    """Tests for recipe lookup."""

    def test_field_name_conversion(self):
        """Display names convert to field names."""
        assert recipe_field_name("StatCard") == "stat_card"
        assert recipe_field_name("motionBindings") == "motion_bindings"
        assert recipe_field_name("toolbar") == "toolbar"

    def test_get_by_display_name(self):
        """Recipes can be looked up by display or field name."""
        recipes = OperationalRecipes.model_validate({"stat_card": {"style": "clean"}})
        assert recipes.get("StatCard").style == "clean"
        assert recipes.get("stat_card").style == "clean"

    def test_missing_recipe_is_none(self):
        """Absent recipes resolve to None."""
        recipes = OperationalRecipes()
        assert recipes.get("DataTable") is None
        assert recipes.get("NoSuchRecipe") is None

    def test_unknown_recipes_kept_as_extras(self):
        """Unknown recipe keys survive parsing."""
        recipes = OperationalRecipes.model_validate({"sparkline": {"stroke": "2px"}})
        assert recipes.get("sparkline") == {"stroke": "2px"}
        assert "sparkline" in recipes.names()

    def test_names_lists_populated(self):
        """names() lists only populated recipes."""
        recipes = OperationalRecipes.model_validate(
            {"toolbar": {"variant": "inset"}, "data_table": {"density": "compact"}}
        )
        assert set(recipes.names()) == {"toolbar", "data_table"}

    def test_gradient_alias(self):
        """Signal path gradients accept from/to keys."""
        gradient = SignalPathGradient.model_validate({"from": "accent", "to": "ring"})
        assert gradient.from_color == "accent"
        assert gradient.to_color == "ring"


class TestParseThemePack:
    """Tests for parse_theme_pack."""

    def test_legacy_from_recipes(self):
        """A dictionary with plain recipes is legacy."""
        pack = parse_theme_pack(make_legacy_data(recipes={"toolbar": {"variant": "inset"}}))
        assert isinstance(pack, LegacyThemePack)
        assert pack.recipes.toolbar.variant == "inset"

    def test_legacy_from_operational_only(self):
        """recipes_by_context with only one context is legacy."""
        data = make_legacy_data()
        del data["recipes"]
        data["recipes_by_context"] = {"operational": {"stat_card": {"style": "minimal"}}}
        pack = parse_theme_pack(data)
        assert isinstance(pack, LegacyThemePack)
        assert pack.recipes.stat_card.style == "minimal"

    def test_current_shape(self):
        """Both contexts present parses as ThemePack."""
        data = make_legacy_data()
        del data["recipes"]
        data["recipes_by_context"] = {"operational": {}, "narrative": {"hero": {"title_size": "4rem"}}}
        pack = parse_theme_pack(data)
        assert isinstance(pack, ThemePack)
        assert pack.recipes_by_context.narrative.hero.title_size == "4rem"

    def test_invalid_mode_rejected(self):
        """Mode must be dark or light."""
        with pytest.raises(ValidationError):
            parse_theme_pack(make_legacy_data(mode="sepia"))

    def test_yaml_dict_round_trip(self, legacy_dark: LegacyThemePack):
        """to_yaml_dict output parses back to an equal pack."""
        theme = normalize_theme_pack(legacy_dark)
        parsed = parse_theme_pack(theme.to_yaml_dict())
        assert isinstance(parsed, ThemePack)
        assert parsed == theme


class TestThemePack:
    """Tests for ThemePack helpers."""

    def test_key_and_mode(self, legacy_dark: LegacyThemePack):
        """Key derives from the name; is_dark follows mode."""
        theme = normalize_theme_pack(legacy_dark)
        assert theme.key == "chronicle-test"
        assert theme.is_dark is True
        assert theme.mode == ThemeMode.DARK

    def test_for_context(self, legacy_dark: LegacyThemePack):
        """for_context selects the matching recipe set."""
        theme = normalize_theme_pack(legacy_dark)
        recipes = theme.recipes_by_context
        assert recipes.for_context(PageContext.NARRATIVE) is recipes.narrative
        assert recipes.for_context(PageContext.OPERATIONAL) is recipes.operational

    def test_metadata(self, legacy_dark: LegacyThemePack):
        """Metadata carries key, name, mode and description."""
        meta = ThemeMetadata.from_theme(normalize_theme_pack(legacy_dark))
        assert meta.key == "chronicle-test"
        assert meta.name == "Chronicle Test"
        assert meta.description == "Chronicle Test for tests"


class TestTunerValues:
    """Tests for TunerValues."""

    def test_defaults(self):
        """All tuners default to 0.5."""
        assert TunerValues().as_dict() == {
            "abstraction": 0.5,
            "density": 0.5,
            "motion": 0.5,
            "contrast": 0.5,
            "narrative": 0.5,
        }

    def test_out_of_range_rejected_on_construction(self):
        """Direct construction validates the range."""
        with pytest.raises(ValidationError):
            TunerValues(density=1.5)

    def test_rounded(self):
        """rounded() rounds every field."""
        tuners = TunerValues(abstraction=0.26, density=0.74)
        rounded = tuners.rounded()
        assert rounded.abstraction == 0.3
        assert rounded.density == 0.7


class TestTasteProfile:
    """Tests for TasteProfile and TasteObservation."""

    def test_defaults_neutral(self):
        """Default profile is mid-range and neutral."""
        profile = TasteProfile()
        assert profile.density == 0.5
        assert profile.color_temperature == ColorTemperature.NEUTRAL
        assert profile.motif_preferences == frozenset()

    def test_to_tuners(self):
        """narrative_strength maps to the narrative tuner."""
        profile = TasteProfile(narrative_strength=0.9, density=0.2)
        tuners = profile.to_tuners()
        assert tuners.narrative == 0.9
        assert tuners.density == 0.2

    def test_describe(self):
        """describe() summarizes the profile."""
        profile = TasteProfile(density=0.8, color_temperature=ColorTemperature.WARM)
        text = profile.describe()
        assert "compact" in text
        assert "warm palette" in text

    def test_negative_weight_rejected(self):
        """Observation weights must be non-negative."""
        with pytest.raises(ValidationError):
            TasteObservation(source="linear", weight=-1.0)

    def test_recognized(self):
        """An observation without a profile is unrecognized."""
        assert TasteObservation(source="x").recognized is False
        assert TasteObservation(source="x", profile=TasteProfile()).recognized is True
