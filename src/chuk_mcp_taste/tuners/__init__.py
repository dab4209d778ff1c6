"""
Tuners - five continuous dials that perturb resolved style output.

This module provides:
- normalize_tuners: Clamp and complete partial tuner input
- compute_overrides: Map tuners to style variables and discrete variants
- serialize_tuners / deserialize_tuners: Flat string mapping round trip
- tuners_to_query / tuners_from_query: URL query string transport
"""

from chuk_mcp_taste.tuners.pipeline import (
    band,
    compute_overrides,
    deserialize_tuners,
    normalize_tuners,
    serialize_tuners,
    tuners_from_query,
    tuners_to_query,
)

__all__ = [
    "band",
    "compute_overrides",
    "deserialize_tuners",
    "normalize_tuners",
    "serialize_tuners",
    "tuners_from_query",
    "tuners_to_query",
]
