"""
Token models - the style primitives of a theme pack.

Every field is required: a partial token set fails validation here,
at the boundary, and never reaches the applier.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field


class TypeScaleToken(BaseModel):
    """One named step of the type scale."""

    font_size: str
    font_weight: str
    letter_spacing: str
    line_height: str
    text_transform: str | None = Field(
        default=None,
        description="Optional text transform (e.g. 'uppercase')",
    )

    model_config = {"frozen": True}


class TypeScale(BaseModel):
    """The full type scale. All steps must be present."""

    h1: TypeScaleToken
    h2: TypeScaleToken
    h3: TypeScaleToken
    body: TypeScaleToken
    kpi: TypeScaleToken
    kpi_compact: TypeScaleToken
    label: TypeScaleToken

    model_config = {"frozen": True}

    def steps(self) -> Iterator[tuple[str, TypeScaleToken]]:
        """Yield (kebab-case step name, token) in canonical order."""
        for name in TypeScale.model_fields:
            yield name.replace("_", "-"), getattr(self, name)


class DensityTokens(BaseModel):
    """Density dimensions, each a simple length value."""

    table_row_height: str
    table_row_height_compact: str
    control_height: str
    control_height_sm: str
    page_gutter: str
    section_gap: str
    card_padding: str
    card_padding_compact: str

    model_config = {"frozen": True}

    def dimensions(self) -> Iterator[tuple[str, str]]:
        """Yield (kebab-case field name, length) in canonical order."""
        for name in DensityTokens.model_fields:
            yield name.replace("_", "-"), getattr(self, name)


class ThemeTokens(BaseModel):
    """
    Flat record of style primitives.

    Color values are opaque strings (usually HSL triplets such as
    '210 20% 98%'); the engine never interprets them.
    """

    # Core colors
    bg: str
    surface: str
    surface_2: str
    surface_inset: str
    border: str
    border_subtle: str
    text: str
    text_muted: str
    accent: str
    accent_fg: str
    accent_muted: str
    accent_secondary: str
    ring: str

    # Semantic colors
    success: str
    success_muted: str
    warning: str
    warning_muted: str
    danger: str
    danger_muted: str

    # Shadows
    shadow_surface: str
    shadow_popover: str
    shadow_glow: str

    # Radii
    radius_surface: str
    radius_control: str

    type_scale: TypeScale
    density: DensityTokens

    model_config = {"frozen": True}
