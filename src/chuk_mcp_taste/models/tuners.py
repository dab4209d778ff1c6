"""
Tuner models - five continuous parameters that perturb resolved style
output without changing the underlying theme pack.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_taste.constants import DEFAULT_TUNER_VALUE, TUNER_FIELDS


class TunerValues(BaseModel):
    """Tuner values, each in [0, 1]."""

    abstraction: float = Field(
        default=DEFAULT_TUNER_VALUE,
        ge=0.0,
        le=1.0,
        description="Motif intensity, signal complexity, background layers",
    )
    density: float = Field(
        default=DEFAULT_TUNER_VALUE,
        ge=0.0,
        le=1.0,
        description="Gaps, max width, table density, surface padding",
    )
    motion: float = Field(
        default=DEFAULT_TUNER_VALUE,
        ge=0.0,
        le=1.0,
        description="Path draw, card expansion, hover glow",
    )
    contrast: float = Field(
        default=DEFAULT_TUNER_VALUE,
        ge=0.0,
        le=1.0,
        description="Border opacity, muted text levels",
    )
    narrative: float = Field(
        default=DEFAULT_TUNER_VALUE,
        ge=0.0,
        le=1.0,
        description="Section spacing, hero height, ribbon prominence",
    )

    model_config = {"frozen": True}

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in TUNER_FIELDS}

    def rounded(self, digits: int = 1) -> TunerValues:
        """Copy with every field rounded, as after a URL round trip."""
        return TunerValues(**{name: round(value, digits) for name, value in self.as_dict().items()})


class StyleOverrides(BaseModel):
    """
    Style deltas computed from tuner values.

    variables holds continuous deltas as custom style properties; the
    remaining fields are discrete variant selections.
    """

    variables: dict[str, str] = Field(default_factory=dict)
    table_density: str = "comfortable"  # comfortable | compact
    motion_enabled: bool = True
    motif_layers: int = 2
    signal_complexity: str = "medium"  # simple | medium | complex
    hero_height: str = "standard"  # compact | standard | immersive
    ribbon_prominence: str = "subtle"  # hidden | subtle | prominent

    model_config = {"frozen": True}
