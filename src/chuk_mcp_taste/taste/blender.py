"""
Taste blender - combines weighted taste observations into one profile.

The blender:
- Resolves raw sources (reference names, URLs) into observations
- Averages continuous fields by weight
- Picks color temperature by weighted plurality
- Unions motif preferences
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from chuk_mcp_taste.constants import (
    COLOR_TEMPERATURE_TIE_ORDER,
    UNKNOWN_SOURCE_DISCOUNT,
    ColorTemperature,
    ErrorMessages,
    TasteSourceKind,
)
from chuk_mcp_taste.models.taste import (
    CONTINUOUS_FIELDS,
    TasteObservation,
    TasteProfile,
    TasteSource,
)
from chuk_mcp_taste.taste.references import get_reference, reference_for_url

logger = logging.getLogger(__name__)

# Stand-in for sources that could not be recognized
NEUTRAL_PROFILE = TasteProfile()


class TasteBlendError(ValueError):
    """Raised when observations cannot be blended."""


def _looks_like_url(value: str) -> bool:
    text = value.strip()
    return "://" in text or ("." in text and " " not in text)


class TasteBlender:
    """
    Blends taste observations into a single TasteProfile.

    Unrecognized observations are not rejected: they contribute the
    neutral profile at a discounted weight.
    """

    def __init__(self, unknown_discount: float = UNKNOWN_SOURCE_DISCOUNT):
        """
        Initialize the blender.

        Args:
            unknown_discount: Weight multiplier for unrecognized sources
        """
        self.unknown_discount = unknown_discount

    def observe(self, source: TasteSource | str, weight: float = 1.0) -> TasteObservation:
        """
        Resolve a source into an observation.

        A bare string is treated as a URL if it looks like one, otherwise as
        a reference name.

        Args:
            source: TasteSource or a bare reference name / URL
            weight: Weight for a bare string source

        Returns:
            The observation; profile is None if the source was not recognized
        """
        if isinstance(source, str):
            kind = TasteSourceKind.URL if _looks_like_url(source) else TasteSourceKind.REFERENCE
            source = TasteSource(kind=kind, value=source, weight=weight)

        profile: TasteProfile | None = None
        if source.kind == TasteSourceKind.REFERENCE:
            profile = get_reference(source.value)
        elif source.kind == TasteSourceKind.URL:
            reference = reference_for_url(source.value)
            profile = get_reference(reference) if reference else None

        if profile is None:
            logger.info(f"Unrecognized taste source '{source.value}', using neutral profile")

        return TasteObservation(source=source.value, weight=source.weight, profile=profile)

    def blend(self, observations: Sequence[TasteObservation]) -> TasteProfile:
        """
        Blend observations into one profile.

        Args:
            observations: Weighted observations

        Returns:
            The blended profile

        Raises:
            TasteBlendError: If there are no observations, or their total weight
                is zero or not finite
        """
        if not observations:
            raise TasteBlendError(ErrorMessages.EMPTY_OBSERVATIONS)

        weighted: list[tuple[TasteProfile, float]] = []
        for obs in observations:
            if obs.profile is None:
                weighted.append((NEUTRAL_PROFILE, obs.weight * self.unknown_discount))
            else:
                weighted.append((obs.profile, obs.weight))

        total = sum(weight for _, weight in weighted)
        if total <= 0:
            raise TasteBlendError(ErrorMessages.ZERO_TOTAL_WEIGHT)
        if not math.isfinite(total):
            raise TasteBlendError(ErrorMessages.INFINITE_TOTAL_WEIGHT)

        values: dict[str, float] = {}
        for field in CONTINUOUS_FIELDS:
            average = sum(getattr(profile, field) * weight for profile, weight in weighted) / total
            values[field] = min(1.0, max(0.0, average))

        return TasteProfile(
            **values,
            color_temperature=self._color_temperature(weighted),
            motif_preferences=frozenset().union(
                *(profile.motif_preferences for profile, _ in weighted)
            ),
        )

    def blend_sources(self, sources: Iterable[TasteSource | str]) -> TasteProfile:
        """Observe each source, then blend."""
        return self.blend([self.observe(source) for source in sources])

    @staticmethod
    def _color_temperature(weighted: list[tuple[TasteProfile, float]]) -> ColorTemperature:
        """Strict weighted plurality; exact ties go to the earliest in tie order."""
        totals = dict.fromkeys(COLOR_TEMPERATURE_TIE_ORDER, 0.0)
        for profile, weight in weighted:
            totals[profile.color_temperature] += weight

        best = COLOR_TEMPERATURE_TIE_ORDER[0]
        for temperature in COLOR_TEMPERATURE_TIE_ORDER[1:]:
            if totals[temperature] > totals[best]:
                best = temperature
        return best
