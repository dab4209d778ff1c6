"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_taste.models import LegacyThemePack, ThemeTokens, parse_theme_pack

LIBRARY_PATH = Path(__file__).parent.parent / "src" / "chuk_mcp_taste" / "themes" / "library"


def _type_step(size: str, transform: str | None = None) -> dict[str, Any]:
    step = {
        "font_size": size,
        "font_weight": "600",
        "letter_spacing": "0",
        "line_height": "1.3",
    }
    if transform:
        step["text_transform"] = transform
    return step


def make_tokens_data(accent: str = "180 60% 40%") -> dict[str, Any]:
    """A complete token dictionary with plain placeholder values."""
    colors = [
        "bg",
        "surface",
        "surface_2",
        "surface_inset",
        "border",
        "border_subtle",
        "text",
        "text_muted",
        "accent_fg",
        "accent_muted",
        "accent_secondary",
        "ring",
        "success",
        "success_muted",
        "warning",
        "warning_muted",
        "danger",
        "danger_muted",
    ]
    data: dict[str, Any] = {name: f"0 0% {i}%" for i, name in enumerate(colors)}
    data.update(
        {
            "accent": accent,
            "shadow_surface": "0 1px 2px rgba(0, 0, 0, 0.1)",
            "shadow_popover": "0 8px 24px rgba(0, 0, 0, 0.2)",
            "shadow_glow": "0 0 40px rgba(0, 0, 0, 0.1)",
            "radius_surface": "10px",
            "radius_control": "6px",
            "type_scale": {
                "h1": _type_step("2rem"),
                "h2": _type_step("1.5rem"),
                "h3": _type_step("1rem"),
                "body": _type_step("0.875rem"),
                "kpi": _type_step("1.75rem"),
                "kpi_compact": _type_step("1.25rem"),
                "label": _type_step("0.6875rem", "uppercase"),
            },
            "density": {
                "table_row_height": "44px",
                "table_row_height_compact": "36px",
                "control_height": "34px",
                "control_height_sm": "30px",
                "page_gutter": "20px",
                "section_gap": "28px",
                "card_padding": "18px",
                "card_padding_compact": "14px",
            },
        }
    )
    return data


def make_legacy_data(
    name: str = "Test Theme",
    mode: str = "dark",
    recipes: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """A legacy (single recipe set) theme dictionary."""
    return {
        "name": name,
        "mode": mode,
        "description": f"{name} for tests",
        "tokens": make_tokens_data(),
        "recipes": recipes if recipes is not None else {},
    }


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in theme library."""
    return LIBRARY_PATH


@pytest.fixture
def tokens() -> ThemeTokens:
    """A complete token set."""
    return ThemeTokens.model_validate(make_tokens_data())


@pytest.fixture
def legacy_dark() -> LegacyThemePack:
    """A legacy dark pack with a handful of operational recipes."""
    pack = parse_theme_pack(
        make_legacy_data(
            name="Chronicle Test",
            mode="dark",
            recipes={
                "app_shell": {"background_treatment": "chronicle", "glow_opacity": "0.1"},
                "surface": {
                    "default": {"border": True, "border_opacity": "0.5", "gradient": False},
                    "floating": {"border": True, "shadow": True, "gradient": True},
                },
                "section_header": {"style": "chronicle", "title_weight": "600"},
                "stat_card": {"style": "accent"},
            },
        )
    )
    assert isinstance(pack, LegacyThemePack)
    return pack


@pytest.fixture
def legacy_light_minimal() -> LegacyThemePack:
    """A legacy light pack with no recipes at all."""
    pack = parse_theme_pack(make_legacy_data(name="Minimal Light", mode="light"))
    assert isinstance(pack, LegacyThemePack)
    return pack
