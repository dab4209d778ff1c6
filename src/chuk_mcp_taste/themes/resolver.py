"""
Recipe resolver - picks the recipe set for a page context.

Same tokens, different behavior: operational pages get dense, restrained
recipes; narrative pages get expressive ones.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_taste.constants import ErrorMessages, PageContext
from chuk_mcp_taste.models.recipes import NarrativeRecipes, OperationalRecipes
from chuk_mcp_taste.models.theme import LegacyThemePack, ThemePack


def coerce_context(context: PageContext | str) -> PageContext:
    """
    Convert a context value to PageContext.

    Raises:
        ValueError: If the value is not a known context
    """
    if isinstance(context, PageContext):
        return context
    try:
        return PageContext(context)
    except ValueError:
        expected = ", ".join(c.value for c in PageContext)
        raise ValueError(
            ErrorMessages.INVALID_CONTEXT.format(context=context, expected=expected)
        ) from None


def resolve_recipes(
    pack: ThemePack | LegacyThemePack,
    context: PageContext | str = PageContext.OPERATIONAL,
) -> OperationalRecipes | NarrativeRecipes:
    """
    Resolve the recipe set for a context.

    A legacy pack has one recipe set and returns it for every context.

    Args:
        pack: Theme pack (normalized or legacy)
        context: Page context

    Returns:
        The recipe set for that context
    """
    ctx = coerce_context(context)
    if isinstance(pack, LegacyThemePack):
        return pack.recipes
    return pack.recipes_by_context.for_context(ctx)


def get_recipe(
    pack: ThemePack | LegacyThemePack,
    context: PageContext | str,
    name: str,
) -> Any | None:
    """Look up one named recipe ('StatCard', 'motifs', ...) for a context."""
    return resolve_recipes(pack, context).get(name)
