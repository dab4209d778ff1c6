"""
Reference taste profiles for well-known products, and what each taste
parameter means at low, medium and high values.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from chuk_mcp_taste.constants import ColorTemperature
from chuk_mcp_taste.models.taste import TasteProfile

TASTE_REFERENCES: dict[str, TasteProfile] = {
    "linear": TasteProfile(
        abstraction=0.7,
        restraint=0.7,
        density=0.4,
        motion=0.6,
        contrast=0.7,
        narrative_strength=0.5,
        typography_looseness=0.3,
        surface_complexity=0.4,
        color_temperature=ColorTemperature.COOL,
        motif_preferences=frozenset({"gradient", "glow"}),
    ),
    "stripe": TasteProfile(
        abstraction=0.5,
        restraint=0.5,
        density=0.5,
        motion=0.7,
        contrast=0.6,
        narrative_strength=0.7,
        typography_looseness=0.4,
        surface_complexity=0.7,
        color_temperature=ColorTemperature.COOL,
        motif_preferences=frozenset({"gradient", "signalPaths"}),
    ),
    "vercel": TasteProfile(
        abstraction=0.8,
        restraint=0.9,
        density=0.3,
        motion=0.5,
        contrast=0.8,
        narrative_strength=0.4,
        typography_looseness=0.2,
        surface_complexity=0.2,
        color_temperature=ColorTemperature.NEUTRAL,
        motif_preferences=frozenset({"grid"}),
    ),
    "notion": TasteProfile(
        abstraction=0.3,
        restraint=0.7,
        density=0.6,
        motion=0.3,
        contrast=0.5,
        narrative_strength=0.6,
        typography_looseness=0.5,
        surface_complexity=0.2,
        color_temperature=ColorTemperature.WARM,
        motif_preferences=frozenset({"illustration"}),
    ),
    "figma": TasteProfile(
        abstraction=0.4,
        restraint=0.4,
        density=0.5,
        motion=0.6,
        contrast=0.5,
        narrative_strength=0.5,
        typography_looseness=0.6,
        surface_complexity=0.5,
        color_temperature=ColorTemperature.NEUTRAL,
        motif_preferences=frozenset({"shapes"}),
    ),
    "apple": TasteProfile(
        abstraction=0.6,
        restraint=0.8,
        density=0.3,
        motion=0.7,
        contrast=0.7,
        narrative_strength=0.8,
        typography_looseness=0.3,
        surface_complexity=0.5,
        color_temperature=ColorTemperature.NEUTRAL,
        motif_preferences=frozenset({"photography", "glow"}),
    ),
    "github": TasteProfile(
        abstraction=0.4,
        restraint=0.6,
        density=0.6,
        motion=0.3,
        contrast=0.6,
        narrative_strength=0.4,
        typography_looseness=0.3,
        surface_complexity=0.3,
        color_temperature=ColorTemperature.COOL,
        motif_preferences=frozenset({"grid", "dots"}),
    ),
    "airbnb": TasteProfile(
        abstraction=0.4,
        restraint=0.5,
        density=0.4,
        motion=0.5,
        contrast=0.5,
        narrative_strength=0.7,
        typography_looseness=0.5,
        surface_complexity=0.4,
        color_temperature=ColorTemperature.WARM,
        motif_preferences=frozenset({"photography"}),
    ),
    "chronicle": TasteProfile(
        abstraction=0.6,
        restraint=0.6,
        density=0.4,
        motion=0.5,
        contrast=0.6,
        narrative_strength=0.6,
        typography_looseness=0.4,
        surface_complexity=0.6,
        color_temperature=ColorTemperature.COOL,
        motif_preferences=frozenset({"glowField", "signalPaths", "grid"}),
    ),
    "raycast": TasteProfile(
        abstraction=0.6,
        restraint=0.6,
        density=0.5,
        motion=0.7,
        contrast=0.7,
        narrative_strength=0.4,
        typography_looseness=0.3,
        surface_complexity=0.6,
        color_temperature=ColorTemperature.WARM,
        motif_preferences=frozenset({"gradient", "glow"}),
    ),
}

# Domain suffix -> reference name, for recognizing URLs
REFERENCE_DOMAINS: dict[str, str] = {
    "linear.app": "linear",
    "stripe.com": "stripe",
    "vercel.com": "vercel",
    "notion.so": "notion",
    "notion.com": "notion",
    "figma.com": "figma",
    "apple.com": "apple",
    "github.com": "github",
    "airbnb.com": "airbnb",
    "raycast.com": "raycast",
}

TASTE_EXPLANATIONS: dict[str, dict[str, Any]] = {
    "abstraction": {
        "name": "Abstraction",
        "description": "How literal vs geometric the visual language is",
        "low": {
            "value": "0.0 - 0.3",
            "meaning": "Concrete, literal, recognizable",
            "examples": ["Solid buttons with clear borders", "Explicit labels and text"],
        },
        "medium": {
            "value": "0.3 - 0.7",
            "meaning": "Balanced, refined",
            "examples": ["Soft shadows, subtle gradients", "Mixed iconography"],
        },
        "high": {
            "value": "0.7 - 1.0",
            "meaning": "Minimal, geometric, artistic",
            "examples": ["Ghost buttons, wire outlines", "Relies on whitespace and composition"],
        },
    },
    "density": {
        "name": "Density",
        "description": "How spacious vs compact the layout is",
        "low": {
            "value": "0.0 - 0.3",
            "meaning": "Spacious, breathing room",
            "examples": ["Large padding", "Marketing pages, hero sections"],
        },
        "medium": {
            "value": "0.3 - 0.7",
            "meaning": "Balanced spacing",
            "examples": ["Standard padding", "Comfortable gaps"],
        },
        "high": {
            "value": "0.7 - 1.0",
            "meaning": "Compact, information-dense",
            "examples": ["Tight padding", "Dashboards, data tables"],
        },
    },
    "motion": {
        "name": "Motion",
        "description": "How static vs animated interactions are",
        "low": {
            "value": "0.0 - 0.3",
            "meaning": "Nearly static, instant",
            "examples": ["No hover effects", "No entrance animations"],
        },
        "medium": {
            "value": "0.3 - 0.7",
            "meaning": "Subtle animations",
            "examples": ["Quick transitions (200ms)", "Fade-in entrance"],
        },
        "high": {
            "value": "0.7 - 1.0",
            "meaning": "Rich, expressive motion",
            "examples": ["Longer transitions (300ms+)", "Staggered entrances"],
        },
    },
    "contrast": {
        "name": "Contrast",
        "description": "How subtle vs bold the visual hierarchy is",
        "low": {
            "value": "0.0 - 0.3",
            "meaning": "Subtle, soft",
            "examples": ["Light borders", "Gentle dividers"],
        },
        "medium": {
            "value": "0.3 - 0.7",
            "meaning": "Balanced hierarchy",
            "examples": ["Visible borders", "Medium shadows"],
        },
        "high": {
            "value": "0.7 - 1.0",
            "meaning": "Bold, stark",
            "examples": ["Strong borders", "High-contrast dark mode"],
        },
    },
    "narrative": {
        "name": "Narrative",
        "description": "How minimal vs storytelling the content presentation is",
        "low": {
            "value": "0.0 - 0.3",
            "meaning": "Minimal, functional",
            "examples": ["Small hero sections", "Direct CTAs"],
        },
        "medium": {
            "value": "0.3 - 0.7",
            "meaning": "Balanced presentation",
            "examples": ["Medium hero", "Feature highlights"],
        },
        "high": {
            "value": "0.7 - 1.0",
            "meaning": "Storytelling, immersive",
            "examples": ["Full-screen hero", "Brand story sections"],
        },
    },
}


def get_reference(name: str) -> TasteProfile | None:
    """Look up a reference profile by name (case-insensitive)."""
    return TASTE_REFERENCES.get(name.strip().lower())


def reference_for_url(url: str) -> str | None:
    """Reference name for a URL whose host matches a known domain."""
    host = urlparse(url if "://" in url else f"https://{url}").hostname or ""
    for domain, reference in REFERENCE_DOMAINS.items():
        if host == domain or host.endswith(f".{domain}"):
            return reference
    return None
