"""
Theme tools - MCP tools for theme discovery, recipe resolution and application.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_taste.constants import ErrorMessages
from chuk_mcp_taste.themes import ThemeApplier, ThemeRegistry, coerce_context, resolve_recipes

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _not_found(name: str) -> str:
    return json.dumps({"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)})


def register_theme_tools(
    mcp: ChukMCPServer,
    registry: ThemeRegistry,
    applier: ThemeApplier,
) -> dict[str, Any]:
    """
    Register theme tools with the MCP server.

    Args:
        mcp: The MCP server instance
        registry: The theme registry
        applier: The theme applier

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def taste_list_themes() -> str:
        """
        List available theme packs.

        Returns:
            JSON string with theme summaries

        Example:
            taste_list_themes()
        """
        try:
            themes = registry.list_themes()
            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {
                            "key": t.key,
                            "name": t.name,
                            "mode": t.mode.value,
                            "description": t.description,
                        }
                        for t in themes
                    ],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_list_themes"] = taste_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def taste_describe_theme(name: str) -> str:
        """
        Get the full definition of a theme pack.

        Returns tokens and both recipe sets, in the same shape theme
        files are written in.

        Args:
            name: Theme name or key (e.g. "Chronicle Dark" or "chronicle-dark")

        Returns:
            JSON string with the theme definition

        Example:
            taste_describe_theme(name="ops-calm")
        """
        try:
            theme = registry.load(name)
            if theme is None:
                return _not_found(name)

            return json.dumps(
                {
                    "status": "success",
                    "key": theme.key,
                    "theme": theme.to_yaml_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_describe_theme"] = taste_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def taste_resolve_recipes(name: str, context: str = "operational") -> str:
        """
        Resolve the recipe set a theme uses in a page context.

        Operational pages are dense dashboards and tools; narrative pages
        are landing and storytelling pages.

        Args:
            name: Theme name or key
            context: "operational" or "narrative"

        Returns:
            JSON string with the recipe names and recipes

        Example:
            taste_resolve_recipes(name="chronicle-dark", context="narrative")
        """
        try:
            theme = registry.load(name)
            if theme is None:
                return _not_found(name)

            ctx = coerce_context(context)
            recipes = resolve_recipes(theme, ctx)
            return json.dumps(
                {
                    "status": "success",
                    "theme": theme.key,
                    "context": ctx.value,
                    "recipe_names": recipes.names(),
                    "recipes": recipes.model_dump(mode="json", exclude_none=True, by_alias=True),
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve recipes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_resolve_recipes"] = taste_resolve_recipes

    @mcp.tool  # type: ignore[arg-type]
    async def taste_apply_theme(name: str, context: str = "operational") -> str:
        """
        Apply a theme and return the resulting style parameters.

        Every token becomes a --ds-* parameter; data-theme, data-theme-mode
        and data-context attributes are set alongside.

        Args:
            name: Theme name or key
            context: "operational" or "narrative"

        Returns:
            JSON string with parameters and attributes

        Example:
            taste_apply_theme(name="hospitality-warm", context="operational")
        """
        try:
            theme = registry.load(name)
            if theme is None:
                return _not_found(name)

            event = applier.apply(theme, context)
            surface = applier.surface
            return json.dumps(
                {
                    "status": "success",
                    "theme": event.theme_key,
                    "mode": theme.mode.value,
                    "context": event.context.value,
                    "dark": theme.is_dark,
                    "attributes": dict(getattr(surface, "attributes", {})),
                    "parameters": event.parameters,
                    "parameter_count": len(event.parameters),
                }
            )
        except Exception as e:
            logger.exception("Failed to apply theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["taste_apply_theme"] = taste_apply_theme

    return tools
