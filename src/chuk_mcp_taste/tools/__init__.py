"""
MCP tool implementations.

Tools are organized by domain:
- themes - Theme discovery, recipe resolution and application
- tuners - Tuner overrides and URL transport
- taste - Reference profiles and taste blending
"""

from chuk_mcp_taste.tools.taste import register_taste_tools
from chuk_mcp_taste.tools.themes import register_theme_tools
from chuk_mcp_taste.tools.tuners import register_tuner_tools

__all__ = [
    "register_taste_tools",
    "register_theme_tools",
    "register_tuner_tools",
]
