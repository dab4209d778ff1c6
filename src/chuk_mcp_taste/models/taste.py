"""
Taste models - heuristic aesthetic observations and the blended profile.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_taste.constants import ColorTemperature, TasteSourceKind
from chuk_mcp_taste.models.tuners import TunerValues

# Continuous profile fields, blended by weighted average
CONTINUOUS_FIELDS: tuple[str, ...] = (
    "abstraction",
    "restraint",
    "density",
    "motion",
    "contrast",
    "narrative_strength",
    "typography_looseness",
    "surface_complexity",
)


def _unit(description: str) -> Any:
    return Field(default=0.5, ge=0.0, le=1.0, description=description)


class TasteProfile(BaseModel):
    """
    A normalized aesthetic profile.

    Continuous fields are in [0, 1].
    """

    abstraction: float = _unit("0 = concrete, 1 = highly abstract")
    restraint: float = _unit("0 = expressive, 1 = minimal")
    density: float = _unit("0 = spacious, 1 = dense")
    motion: float = _unit("0 = static, 1 = animated")
    contrast: float = _unit("0 = low, 1 = high")
    narrative_strength: float = _unit("0 = functional, 1 = storytelling")
    typography_looseness: float = _unit("0 = strict, 1 = playful")
    surface_complexity: float = _unit("0 = flat, 1 = layered")
    color_temperature: ColorTemperature = ColorTemperature.NEUTRAL
    motif_preferences: frozenset[str] = Field(default_factory=frozenset)

    model_config = {"frozen": True}

    def to_tuners(self) -> TunerValues:
        """Project the profile onto the five tuners."""
        return TunerValues(
            abstraction=self.abstraction,
            density=self.density,
            motion=self.motion,
            contrast=self.contrast,
            narrative=self.narrative_strength,
        )

    def describe(self) -> str:
        """Human-readable one-line description."""
        parts = [
            "minimal, geometric" if self.abstraction > 0.5 else "concrete, recognizable",
            "compact" if self.density > 0.5 else "spacious",
            "animated" if self.motion > 0.5 else "subtle/static",
            "bold hierarchy" if self.contrast > 0.5 else "soft, subtle",
            "storytelling" if self.narrative_strength > 0.5 else "functional",
        ]
        summary = ", ".join(parts)
        return f"{summary}; {self.color_temperature.value} palette"


class TasteSource(BaseModel):
    """A raw inspiration source before it is resolved to a profile."""

    kind: TasteSourceKind
    value: str
    weight: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)

    model_config = {"frozen": True}


class TasteObservation(BaseModel):
    """
    One weighted observation.

    profile is None when the source could not be recognized; the blender
    substitutes a neutral profile at a discounted weight.
    """

    source: str
    weight: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)
    profile: TasteProfile | None = None

    model_config = {"frozen": True}

    @property
    def recognized(self) -> bool:
        return self.profile is not None
