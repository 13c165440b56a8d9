# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Storyboard graph data for a parsed document.

The storyboard shows:
- One node per screen, with the number of direct elements it holds.
- One directed edge per declared link, flagged when an endpoint is missing.
- Which screens the navigation construct starts from.

Positioning, panning and zooming are left to whatever draws the graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wireframe.model.document import DrawerStack, NavigationConfig, NavigationStack, ParseResult, TabStack

# ###############
# Public Interface
# ###############


@dataclass
class ScreenNode:
    """A screen in the storyboard.

    Attributes:
        name: Screen name.
        line_number: Line of the screen declaration.
        element_count: Number of direct children of the screen.
        is_root: True if navigation starts at this screen (root or tab).
    """

    name: str
    line_number: int
    element_count: int
    is_root: bool = False


@dataclass
class LinkEdge:
    """A directed edge between two screens.

    Attributes:
        source: Name of the source screen.
        target: Name of the destination screen.
        resolved: True if both endpoints are declared screens.
    """

    source: str
    target: str
    resolved: bool


@dataclass
class StoryboardData:
    """Full description of a storyboard to be drawn.

    Attributes:
        nodes: Screens in declaration order.
        edges: Links in declaration order.
        navigation_kind: Kind of the navigation construct, or None.
    """

    nodes: list[ScreenNode] = field(default_factory=list)
    edges: list[LinkEdge] = field(default_factory=list)
    navigation_kind: str | None = None


def build_storyboard(result: ParseResult) -> StoryboardData:
    """Build a :class:`StoryboardData` description from a parse result."""
    navigation = result.navigation[0] if result.navigation else None
    roots = _root_screens(navigation)
    declared = set(result.screen_names())

    nodes = [
        ScreenNode(
            name=screen.name,
            line_number=screen.line_number,
            element_count=len(screen.children),
            is_root=screen.name in roots,
        )
        for screen in result.screens
    ]
    edges = [
        LinkEdge(
            source=link.source,
            target=link.destination,
            resolved=link.source in declared and link.destination in declared,
        )
        for link in result.links
    ]
    return StoryboardData(
        nodes=nodes,
        edges=edges,
        navigation_kind=navigation.kind if navigation is not None else None,
    )


# ################
# Implementation
# ################


def _root_screens(navigation: NavigationConfig | None) -> set[str]:
    """Return the screen names navigation starts from."""
    if navigation is None:
        return set()
    if isinstance(navigation, NavigationStack):
        return {navigation.root}
    if isinstance(navigation, TabStack):
        return set(navigation.tabs)
    if isinstance(navigation, DrawerStack):
        return {navigation.root}
    raise TypeError(f"Unknown navigation construct: {type(navigation).__name__}")
