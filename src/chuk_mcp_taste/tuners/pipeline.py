"""
Tuner pipeline - normalize, map to style overrides, serialize.

All functions are pure. Input from callers and URLs is clamped or dropped,
never rejected: tuners are a permissive path.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

from chuk_mcp_taste.constants import (
    DEFAULT_TUNER_VALUE,
    HIGH_BAND_MIN,
    LOW_BAND_MAX,
    MOTION_DISABLED_BELOW,
    TUNER_FIELDS,
    TUNER_PREFIX,
)
from chuk_mcp_taste.models.tuners import StyleOverrides, TunerValues

# Continuous ranges: (value at tuner 0.0, value at tuner 1.0)
SECTION_GAP_PX = (64.0, 16.0)
CARD_PADDING_PX = (28.0, 12.0)
PAGE_GUTTER_PX = (32.0, 12.0)
CONTENT_MAX_WIDTH_PX = (960.0, 1440.0)
TRANSITION_MS = (100.0, 400.0)
HOVER_LIFT_PX = (0.0, 4.0)
GLOW_OPACITY = (0.0, 0.3)
PATH_DRAW_MS = (600.0, 2400.0)
BORDER_OPACITY = (0.2, 0.8)
TEXT_MUTED_OPACITY = (0.5, 0.85)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _clamped_number(value: Any) -> float | None:
    """value clamped into [0, 1], or None if it is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, int):
        # Clamp before converting; huge ints overflow float()
        return float(max(0, min(1, value)))
    if not math.isfinite(value):
        return None
    return _clamp(value)


def _lerp(bounds: tuple[float, float], t: float) -> float:
    start, end = bounds
    return start + (end - start) * t


def band(value: float) -> str:
    """Classify a tuner value as 'low', 'medium' or 'high'."""
    if value < LOW_BAND_MAX:
        return "low"
    if value >= HIGH_BAND_MIN:
        return "high"
    return "medium"


def normalize_tuners(
    partial: Mapping[str, Any] | TunerValues | None = None,
    previous: TunerValues | None = None,
) -> TunerValues:
    """
    Build a complete TunerValues from partial input.

    Per field: a finite numeric override wins (clamped into [0, 1]),
    otherwise the previous value, otherwise 0.5. Non-numeric overrides
    are ignored.

    Args:
        partial: Field overrides (mapping or TunerValues)
        previous: Values to fall back on

    Returns:
        Complete, in-range tuner values
    """
    overrides = partial.as_dict() if isinstance(partial, TunerValues) else dict(partial or {})
    values: dict[str, float] = {}
    for name in TUNER_FIELDS:
        value = _clamped_number(overrides.get(name))
        if value is not None:
            values[name] = value
        elif previous is not None:
            values[name] = getattr(previous, name)
        else:
            values[name] = DEFAULT_TUNER_VALUE
    return TunerValues(**values)


def compute_overrides(tuners: TunerValues) -> StyleOverrides:
    """
    Map tuner values to style overrides.

    density, motion and contrast map to continuous style variables;
    abstraction and narrative select discrete variants.

    Args:
        tuners: Normalized tuner values

    Returns:
        The style overrides for these values
    """
    density = tuners.density
    motion = tuners.motion
    contrast = tuners.contrast

    variables = {
        # Density
        f"{TUNER_PREFIX}section-gap": f"{round(_lerp(SECTION_GAP_PX, density))}px",
        f"{TUNER_PREFIX}card-padding": f"{round(_lerp(CARD_PADDING_PX, density))}px",
        f"{TUNER_PREFIX}page-gutter": f"{round(_lerp(PAGE_GUTTER_PX, density))}px",
        f"{TUNER_PREFIX}content-max-width": f"{round(_lerp(CONTENT_MAX_WIDTH_PX, density))}px",
        # Motion
        f"{TUNER_PREFIX}transition-duration": f"{round(_lerp(TRANSITION_MS, motion))}ms",
        f"{TUNER_PREFIX}hover-lift": f"{_lerp(HOVER_LIFT_PX, motion):.1f}px",
        f"{TUNER_PREFIX}glow-opacity": f"{_lerp(GLOW_OPACITY, motion):.2f}",
        f"{TUNER_PREFIX}path-draw-duration": f"{round(_lerp(PATH_DRAW_MS, motion))}ms",
        # Contrast
        f"{TUNER_PREFIX}border-opacity": f"{_lerp(BORDER_OPACITY, contrast):.2f}",
        f"{TUNER_PREFIX}text-muted-opacity": f"{_lerp(TEXT_MUTED_OPACITY, contrast):.2f}",
    }

    abstraction = band(tuners.abstraction)
    narrative = band(tuners.narrative)

    return StyleOverrides(
        variables=variables,
        table_density="compact" if band(density) == "high" else "comfortable",
        motion_enabled=motion >= MOTION_DISABLED_BELOW,
        motif_layers={"low": 1, "medium": 2, "high": 3}[abstraction],
        signal_complexity={"low": "simple", "medium": "medium", "high": "complex"}[abstraction],
        hero_height={"low": "compact", "medium": "standard", "high": "immersive"}[narrative],
        ribbon_prominence={"low": "hidden", "medium": "subtle", "high": "prominent"}[narrative],
    )


def serialize_tuners(tuners: TunerValues) -> dict[str, str]:
    """One entry per tuner, formatted to one decimal place."""
    return {name: f"{value:.1f}" for name, value in tuners.as_dict().items()}


def deserialize_tuners(mapping: Mapping[str, Any]) -> dict[str, float]:
    """
    Read tuner values from a flat string mapping.

    Unknown keys are ignored. Unparsable, non-finite or out-of-range values
    are dropped, so normalize_tuners() falls back for those fields.

    Args:
        mapping: Flat mapping such as parsed query parameters

    Returns:
        Partial tuner values
    """
    values: dict[str, float] = {}
    for name in TUNER_FIELDS:
        raw = mapping.get(name)
        if raw is None:
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError):
            continue
        if math.isfinite(value) and 0.0 <= value <= 1.0:
            values[name] = value
    return values


def tuners_to_query(tuners: TunerValues, base_query: str = "") -> str:
    """
    Encode tuners into a URL query string.

    Keys in base_query other than the tuner fields are kept in place.

    Args:
        tuners: Tuner values
        base_query: Existing query string (with or without leading '?')

    Returns:
        Query string without a leading '?'
    """
    pairs = [
        (key, value)
        for key, value in parse_qsl(base_query.lstrip("?"), keep_blank_values=True)
        if key not in TUNER_FIELDS
    ]
    pairs.extend(serialize_tuners(tuners).items())
    return urlencode(pairs)


def tuners_from_query(query: str) -> dict[str, float]:
    """Read partial tuner values from a URL query string; other keys are ignored."""
    params: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return deserialize_tuners(params)
