# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI for editing and previewing wireframes."""

from __future__ import annotations

from typing import Any

import dash
from dash import Input, Output, dcc, html

from wireframe.dsl.parser import parse
from wireframe.model.document import ParseResult
from wireframe.model.elements import Screen
from wireframe.views.markers import build_markers
from wireframe.views.render import render_screen
from wireframe.views.screens import select_active_screen
from wireframe.views.storyboard import build_storyboard

# ###############
# Public Interface
# ###############

APP_TITLE = "Wireframe Studio"


def create_app(source: str = "", title: str = APP_TITLE) -> dash.Dash:
    """Create the studio application with *source* preloaded in the editor."""
    app = dash.Dash(__name__, title=title)
    app.layout = _build_layout(source, title)

    @app.callback(
        Output("diagnostics", "children"),
        Output("screen-select", "options"),
        Output("screen-select", "value"),
        Output("screen-view", "children"),
        Output("storyboard", "children"),
        Input("editor", "value"),
        Input("screen-select", "value"),
    )
    def _on_change(text: str | None, selected: str | None) -> tuple[Any, ...]:
        return update_views(text or "", selected)

    return app


def update_views(source: str, selected: str | None) -> tuple[Any, ...]:
    """Re-parse *source* and rebuild every pane.

    Args:
        source: Current editor text.
        selected: Name of the screen shown before this update, if any.

    Returns:
        ``(diagnostics, screen_options, screen_value, screen_view, storyboard)``
        in the order of the callback outputs.
    """
    result = parse(source)
    active = select_active_screen(result, selected)
    options = [{"label": f"{name} (L{screen.line_number})", "value": name} for name, screen in _unique_screens(result)]
    return (
        _render_diagnostics(source, result),
        options,
        active.name if active is not None else None,
        render_screen(active),
        _render_storyboard(result),
    )


# ################
# Implementation
# ################


def _build_layout(source: str, title: str) -> html.Div:
    """Build the two-pane application layout."""
    return html.Div(
        [
            html.Div(
                [
                    html.H1(title),
                    dcc.Textarea(
                        id="editor",
                        value=source,
                        spellCheck=False,
                        style={"width": "100%", "height": "60vh", "fontFamily": "monospace"},
                    ),
                    html.Div(id="diagnostics", className="error-display"),
                ],
                className="pane editor-pane",
            ),
            html.Div(
                [
                    dcc.Dropdown(id="screen-select", options=[], clearable=False),
                    html.Div(id="screen-view"),
                    html.H3("Storyboard"),
                    html.Div(id="storyboard"),
                ],
                className="pane renderer-pane",
            ),
        ],
        style={"fontFamily": "sans-serif", "display": "flex", "gap": "2rem", "padding": "2rem"},
    )


def _unique_screens(result: ParseResult) -> list[tuple[str, Screen]]:
    """Return ``(name, screen)`` pairs, keeping the first screen of each name."""
    seen: dict[str, Screen] = {}
    for screen in result.screens:
        seen.setdefault(screen.name, screen)
    return list(seen.items())


def _render_diagnostics(source: str, result: ParseResult) -> list[Any]:
    """List every diagnostic; nothing is shown for a clean document."""
    if not result.diagnostics:
        return []
    items = [
        html.Li(f"Line {marker.line_number}: {marker.message}")
        for marker in build_markers(source, result.diagnostics)
    ]
    return [html.H3("Errors:"), html.Ul(items)]


def _render_storyboard(result: ParseResult) -> list[Any]:
    """Render the storyboard as plain lists of screens and links."""
    data = build_storyboard(result)
    nodes = [
        html.Li(
            f"{node.name} ({node.element_count} elements)" + (" [start]" if node.is_root else ""),
            className="storyboard-screen-node",
        )
        for node in data.nodes
    ]
    edges = [
        html.Li(
            f"{edge.source} -> {edge.target}",
            className="storyboard-link" if edge.resolved else "storyboard-link dangling",
        )
        for edge in data.edges
    ]
    children: list[Any] = []
    if data.navigation_kind is not None:
        children.append(html.P(f"Navigation: {data.navigation_kind}"))
    children.extend([html.Ul(nodes), html.Ul(edges)])
    return children
