"""
Tuner tools - MCP tools for tuner overrides and URL transport.

Tuners are five 0-1 dials (abstraction, density, motion, contrast,
narrative) that adjust resolved styles without changing the theme.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_taste.tuners import (
    compute_overrides,
    normalize_tuners,
    serialize_tuners,
    tuners_from_query,
    tuners_to_query,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _partial(**values: float | None) -> dict[str, float]:
    return {name: value for name, value in values.items() if value is not None}


def register_tuner_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register tuner tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def taste_compute_overrides(
        abstraction: float | None = None,
        density: float | None = None,
        motion: float | None = None,
        contrast: float | None = None,
        narrative: float | None = None,
        query: str = "",
    ) -> str:
        """
        Compute style overrides for tuner values.

        Values are clamped to 0-1; omitted tuners come from the query string
        if given, otherwise default to 0.5.

        Args:
            abstraction: Motif intensity, signal complexity, background layers
            density: Gaps, max width, table density, surface padding
            motion: Path draw, card expansion, hover glow
            contrast: Border opacity, muted text levels
            narrative: Section spacing, hero height, ribbon prominence
            query: Optional URL query string to read tuners from

        Returns:
            JSON string with normalized tuners and overrides

        Example:
            taste_compute_overrides(density=0.8, motion=0.2)
        """
        try:
            base = normalize_tuners(tuners_from_query(query)) if query else None
            tuners = normalize_tuners(
                _partial(
                    abstraction=abstraction,
                    density=density,
                    motion=motion,
                    contrast=contrast,
                    narrative=narrative,
                ),
                previous=base,
            )
            overrides = compute_overrides(tuners)
            return json.dumps(
                {
                    "status": "success",
                    "tuners": tuners.as_dict(),
                    "overrides": overrides.model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute overrides")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_compute_overrides"] = taste_compute_overrides

    @mcp.tool  # type: ignore[arg-type]
    async def taste_tuners_to_query(
        abstraction: float | None = None,
        density: float | None = None,
        motion: float | None = None,
        contrast: float | None = None,
        narrative: float | None = None,
        base_query: str = "",
    ) -> str:
        """
        Encode tuner values into a shareable URL query string.

        Other parameters in base_query (such as theme and context) are kept.

        Args:
            abstraction: Abstraction tuner (0-1)
            density: Density tuner (0-1)
            motion: Motion tuner (0-1)
            contrast: Contrast tuner (0-1)
            narrative: Narrative tuner (0-1)
            base_query: Existing query string to merge into

        Returns:
            JSON string with the query string and serialized values

        Example:
            taste_tuners_to_query(density=0.7, base_query="theme=ops-calm")
        """
        try:
            tuners = normalize_tuners(
                _partial(
                    abstraction=abstraction,
                    density=density,
                    motion=motion,
                    contrast=contrast,
                    narrative=narrative,
                )
            )
            return json.dumps(
                {
                    "status": "success",
                    "query": tuners_to_query(tuners, base_query),
                    "values": serialize_tuners(tuners),
                }
            )
        except Exception as e:
            logger.exception("Failed to encode tuners")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_tuners_to_query"] = taste_tuners_to_query

    @mcp.tool  # type: ignore[arg-type]
    async def taste_tuners_from_query(query: str) -> str:
        """
        Read tuner values from a URL query string.

        Malformed or out-of-range values are dropped and fall back to 0.5.

        Args:
            query: Query string (e.g. "theme=ops-calm&density=0.8")

        Returns:
            JSON string with the values found and the normalized tuners

        Example:
            taste_tuners_from_query(query="?density=0.8&motion=0.2")
        """
        try:
            found = tuners_from_query(query)
            return json.dumps(
                {
                    "status": "success",
                    "found": found,
                    "tuners": normalize_tuners(found).as_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to decode tuners")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_tuners_from_query"] = taste_tuners_from_query

    return tools
