"""
Taste tools - MCP tools for reference profiles and taste blending.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_taste.constants import ErrorMessages
from chuk_mcp_taste.models.taste import TasteProfile
from chuk_mcp_taste.taste import (
    TASTE_EXPLANATIONS,
    TASTE_REFERENCES,
    TasteBlender,
    get_reference,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _profile_dict(profile: TasteProfile) -> dict[str, Any]:
    data = profile.model_dump(mode="json")
    data["motif_preferences"] = sorted(profile.motif_preferences)
    return data


def register_taste_tools(mcp: ChukMCPServer, blender: TasteBlender) -> dict[str, Any]:
    """
    Register taste tools with the MCP server.

    Args:
        mcp: The MCP server instance
        blender: The taste blender

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def taste_get_reference(reference: str) -> str:
        """
        Get the taste profile of a well-known product.

        Args:
            reference: Reference name (linear, stripe, vercel, notion, figma,
                apple, github, airbnb, chronicle, raycast)

        Returns:
            JSON string with the profile, its tuner projection and a summary

        Example:
            taste_get_reference(reference="linear")
        """
        try:
            profile = get_reference(reference)
            if profile is None:
                available = ", ".join(TASTE_REFERENCES)
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_REFERENCE.format(
                            reference=reference, available=available
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "reference": reference.strip().lower(),
                    "profile": _profile_dict(profile),
                    "tuners": profile.to_tuners().as_dict(),
                    "description": profile.describe(),
                }
            )
        except Exception as e:
            logger.exception("Failed to get reference")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_get_reference"] = taste_get_reference

    @mcp.tool  # type: ignore[arg-type]
    async def taste_blend(sources: list[str], weights: list[float] | None = None) -> str:
        """
        Blend several inspiration sources into one taste profile.

        Sources may be reference names or URLs of known products.
        Unrecognized sources still count, as a neutral profile at a
        quarter of their weight.

        Args:
            sources: Reference names or URLs
            weights: Optional weight per source (default 1.0 each)

        Returns:
            JSON string with the blended profile and tuner values

        Example:
            taste_blend(sources=["linear", "https://stripe.com"], weights=[2, 1])
        """
        try:
            weights = weights or [1.0] * len(sources)
            if len(weights) != len(sources):
                raise ValueError("weights must have one entry per source")

            observations = [
                blender.observe(source, weight) for source, weight in zip(sources, weights)
            ]
            profile = blender.blend(observations)
            return json.dumps(
                {
                    "status": "success",
                    "profile": _profile_dict(profile),
                    "tuners": profile.to_tuners().rounded().as_dict(),
                    "description": profile.describe(),
                    "unrecognized": [o.source for o in observations if not o.recognized],
                }
            )
        except Exception as e:
            logger.exception("Failed to blend taste")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_blend"] = taste_blend

    @mcp.tool  # type: ignore[arg-type]
    async def taste_explain(parameter: str = "all") -> str:
        """
        Explain what a taste parameter controls at low, medium and high values.

        Args:
            parameter: abstraction, density, motion, contrast, narrative, or "all"

        Returns:
            JSON string with the explanation(s)

        Example:
            taste_explain(parameter="density")
        """
        try:
            if parameter == "all":
                return json.dumps({"status": "success", "parameters": TASTE_EXPLANATIONS})

            explanation = TASTE_EXPLANATIONS.get(parameter)
            if explanation is None:
                available = ", ".join([*TASTE_EXPLANATIONS, "all"])
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_PARAMETER.format(
                            parameter=parameter, available=available
                        ),
                    }
                )

            return json.dumps(
                {"status": "success", "parameter": parameter, "explanation": explanation}
            )
        except Exception as e:
            logger.exception("Failed to explain parameter")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_explain"] = taste_explain

    return tools
