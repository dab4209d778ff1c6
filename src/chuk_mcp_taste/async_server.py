#!/usr/bin/env python3
"""
Async Taste MCP Server using chuk-mcp-server

This server provides MCP tools for context-aware theme resolution.
Theme packs are design tokens plus recipes; the same tokens behave
differently on operational pages and narrative pages.

The server provides tools for:
- Listing, describing and applying theme packs
- Resolving recipes per page context
- Computing tuner overrides and encoding them in URLs
- Blending reference products into a taste profile
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_taste.taste import TasteBlender
from chuk_mcp_taste.themes import InMemorySurface, ThemeApplier, ThemeRegistry
from chuk_mcp_taste.tools import (
    register_taste_tools,
    register_theme_tools,
    register_tuner_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-taste")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEMES_DIR = Path(os.environ.get("CHUK_TASTE_THEMES_DIR") or BASE_PATH / "themes")
THEMES_LIBRARY_PATH = Path(__file__).parent / "themes" / "library"

# Create components
theme_registry = ThemeRegistry.with_library(
    project_path=THEMES_DIR,
    library_path=THEMES_LIBRARY_PATH,
)
theme_applier = ThemeApplier(InMemorySurface())
taste_blender = TasteBlender()

# Register all tools
theme_tools = register_theme_tools(mcp, theme_registry, theme_applier)
tuner_tools = register_tuner_tools(mcp)
taste_tools = register_taste_tools(mcp, taste_blender)

# Export tool functions for direct access
taste_list_themes = theme_tools["taste_list_themes"]
taste_describe_theme = theme_tools["taste_describe_theme"]
taste_resolve_recipes = theme_tools["taste_resolve_recipes"]
taste_apply_theme = theme_tools["taste_apply_theme"]

taste_compute_overrides = tuner_tools["taste_compute_overrides"]
taste_tuners_to_query = tuner_tools["taste_tuners_to_query"]
taste_tuners_from_query = tuner_tools["taste_tuners_from_query"]

taste_get_reference = taste_tools["taste_get_reference"]
taste_blend = taste_tools["taste_blend"]
taste_explain = taste_tools["taste_explain"]

logger.info("CHUK Taste MCP Server initialized")
logger.info(f"  Library path: {THEMES_LIBRARY_PATH}")
logger.info(f"  Themes dir: {THEMES_DIR}")
logger.info(f"  Themes loaded: {', '.join(theme_registry.list_names())}")
