"""
Theme applier - projects a theme pack onto a style surface.

The surface is anything that accepts named style parameters, attributes
and class toggles (a document root, a test double, a template context).
Applying a theme writes every token as a --ds-* parameter, sets the mode
and context flags, and notifies subscribers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from chuk_mcp_taste.constants import DEFAULT_THEME, STYLE_PREFIX, PageContext
from chuk_mcp_taste.models.recipes import NarrativeRecipes, OperationalRecipes
from chuk_mcp_taste.models.theme import ThemePack
from chuk_mcp_taste.models.tokens import ThemeTokens
from chuk_mcp_taste.themes.registry import ThemeRegistry
from chuk_mcp_taste.themes.resolver import coerce_context, resolve_recipes

logger = logging.getLogger(__name__)

DARK_CLASS = "dark"
THEME_ATTRIBUTE = "data-theme"
MODE_ATTRIBUTE = "data-theme-mode"
CONTEXT_ATTRIBUTE = "data-context"

# (parameter suffix, token field)
_COLOR_PARAMETERS: tuple[tuple[str, str], ...] = (
    ("bg", "bg"),
    ("surface", "surface"),
    ("surface-2", "surface_2"),
    ("surface-inset", "surface_inset"),
    ("border", "border"),
    ("border-subtle", "border_subtle"),
    ("text", "text"),
    ("text-muted", "text_muted"),
    ("accent", "accent"),
    ("accent-foreground", "accent_fg"),
    ("accent-muted", "accent_muted"),
    ("accent-secondary", "accent_secondary"),
    ("ring", "ring"),
    # Semantic
    ("success", "success"),
    ("success-muted", "success_muted"),
    ("warning", "warning"),
    ("warning-muted", "warning_muted"),
    ("danger", "danger"),
    ("danger-muted", "danger_muted"),
    # Shadows
    ("shadow-surface", "shadow_surface"),
    ("shadow-popover", "shadow_popover"),
    ("shadow-glow", "shadow_glow"),
    # Radii
    ("radius-surface", "radius_surface"),
    ("radius-control", "radius_control"),
)


class StyleSurface(Protocol):
    """Target that style parameters are written to."""

    def set_property(self, name: str, value: str) -> None: ...

    def remove_property(self, name: str) -> None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def toggle_class(self, name: str, enabled: bool) -> None: ...


class InMemorySurface:
    """A StyleSurface that records everything in plain collections."""

    def __init__(self) -> None:
        self.properties: dict[str, str] = {}
        self.attributes: dict[str, str] = {}
        self.classes: set[str] = set()

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def remove_property(self, name: str) -> None:
        self.properties.pop(name, None)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def toggle_class(self, name: str, enabled: bool) -> None:
        if enabled:
            self.classes.add(name)
        else:
            self.classes.discard(name)


def style_parameters(tokens: ThemeTokens) -> dict[str, str]:
    """
    Project tokens onto named style parameters.

    Order is fixed: colors, shadows, radii, then four parameters per type
    step (plus transform when present), then one per density dimension.

    Args:
        tokens: Theme tokens

    Returns:
        Ordered mapping of parameter name to value
    """
    params: dict[str, str] = {}

    for suffix, attr in _COLOR_PARAMETERS:
        params[f"{STYLE_PREFIX}{suffix}"] = getattr(tokens, attr)

    for step, token in tokens.type_scale.steps():
        prefix = f"{STYLE_PREFIX}type-{step}"
        params[f"{prefix}-size"] = token.font_size
        params[f"{prefix}-weight"] = token.font_weight
        params[f"{prefix}-tracking"] = token.letter_spacing
        params[f"{prefix}-leading"] = token.line_height
        if token.text_transform:
            params[f"{prefix}-transform"] = token.text_transform

    for dimension, value in tokens.density.dimensions():
        params[f"{STYLE_PREFIX}density-{dimension}"] = value

    return params


@dataclass(frozen=True)
class AppliedState:
    """The theme and context currently on the surface."""

    theme: ThemePack
    context: PageContext


@dataclass(frozen=True)
class ThemeChangeEvent:
    """Emitted once per apply()."""

    theme: ThemePack
    context: PageContext
    parameters: dict[str, str] = field(default_factory=dict)

    @property
    def theme_key(self) -> str:
        return self.theme.key


ThemeChangeListener = Callable[[ThemeChangeEvent], None]


class ThemeApplier:
    """
    Applies theme packs to a StyleSurface.

    The applier owns its listener list; there is no global event bus.
    """

    def __init__(self, surface: StyleSurface):
        """
        Initialize the applier.

        Args:
            surface: Where style parameters are written
        """
        self.surface = surface
        self._state: AppliedState | None = None
        self._applied: dict[str, str] = {}
        self._listeners: list[ThemeChangeListener] = []

    @property
    def state(self) -> AppliedState | None:
        return self._state

    @property
    def current_theme(self) -> ThemePack | None:
        return self._state.theme if self._state else None

    @property
    def current_context(self) -> PageContext | None:
        return self._state.context if self._state else None

    @property
    def applied_parameters(self) -> dict[str, str]:
        return dict(self._applied)

    def current_recipes(self) -> OperationalRecipes | NarrativeRecipes | None:
        """Recipes for the applied theme and context, or None before the first apply."""
        if self._state is None:
            return None
        return resolve_recipes(self._state.theme, self._state.context)

    def subscribe(self, listener: ThemeChangeListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(
        self,
        theme: ThemePack,
        context: PageContext | str = PageContext.OPERATIONAL,
    ) -> ThemeChangeEvent:
        """
        Apply a normalized theme pack in a context.

        Parameters set by a previous theme and absent from this one are
        removed, so nothing leaks between themes.

        Args:
            theme: Normalized theme pack
            context: Page context

        Returns:
            The change event delivered to subscribers

        Raises:
            ValueError: If context is not a known context
        """
        ctx = coerce_context(context)
        params = style_parameters(theme.tokens)

        for stale in self._applied.keys() - params.keys():
            self.surface.remove_property(stale)

        self.surface.set_attribute(THEME_ATTRIBUTE, theme.key)
        self.surface.set_attribute(MODE_ATTRIBUTE, theme.mode.value)
        self.surface.set_attribute(CONTEXT_ATTRIBUTE, ctx.value)
        self.surface.toggle_class(DARK_CLASS, theme.is_dark)

        for name, value in params.items():
            self.surface.set_property(name, value)

        self._applied = params
        self._state = AppliedState(theme=theme, context=ctx)

        event = ThemeChangeEvent(theme=theme, context=ctx, parameters=dict(params))
        for listener in list(self._listeners):
            listener(event)

        logger.info(f"Applied: {theme.name} ({theme.mode.value} mode, {ctx.value} context)")
        return event

    def apply_from_query(
        self,
        registry: ThemeRegistry,
        params: Mapping[str, str],
        default_theme: str = DEFAULT_THEME,
        default_context: PageContext = PageContext.OPERATIONAL,
    ) -> ThemeChangeEvent | None:
        """
        Apply the theme and context named in query parameters.

        Unknown theme names fall back to default_theme and invalid contexts
        fall back to default_context.

        Args:
            registry: Where themes are looked up
            params: Query parameters ('theme', 'context')
            default_theme: Theme used when the requested one is missing
            default_context: Context used when the requested one is invalid

        Returns:
            The change event, or None if no theme could be loaded
        """
        name = params.get("theme") or default_theme
        requested_context = params.get("context")
        context = default_context
        if requested_context in {c.value for c in PageContext}:
            context = PageContext(requested_context)

        theme = registry.load(name) or registry.load(default_theme)
        if theme is None:
            return None
        return self.apply(theme, context)
