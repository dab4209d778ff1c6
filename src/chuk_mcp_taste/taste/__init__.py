"""
Taste - blending aesthetic observations into a profile.

This module provides:
- TasteBlender: Weighted blending of taste observations
- TASTE_REFERENCES: Profiles for well-known products
- TASTE_EXPLANATIONS: What each taste parameter means
"""

from chuk_mcp_taste.taste.blender import NEUTRAL_PROFILE, TasteBlender, TasteBlendError
from chuk_mcp_taste.taste.references import (
    REFERENCE_DOMAINS,
    TASTE_EXPLANATIONS,
    TASTE_REFERENCES,
    get_reference,
    reference_for_url,
)

__all__ = [
    "NEUTRAL_PROFILE",
    "REFERENCE_DOMAINS",
    "TASTE_EXPLANATIONS",
    "TASTE_REFERENCES",
    "TasteBlendError",
    "TasteBlender",
    "get_reference",
    "reference_for_url",
]
