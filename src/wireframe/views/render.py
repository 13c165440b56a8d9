# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Render parsed screens as Dash HTML component trees.

Rendering is a pure walk of the document model: components become leaf
HTML elements and stacks become nested ``div`` groups. Image sources are
filtered here, since the parser keeps whatever literal value it was given.
"""

from __future__ import annotations

import logging

from dash import dcc, html

from wireframe.model.elements import (
    ButtonComponent,
    Container,
    DslElement,
    ImageComponent,
    InputComponent,
    LabelComponent,
    Screen,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

BLOCKED_SCHEMES: tuple[str, ...] = ("javascript:", "data:")


def sanitize_src(src: str | None) -> str | None:
    """Return *src* if it is safe to load, otherwise None.

    Empty values and ``javascript:`` / ``data:`` URIs are rejected.
    """
    if not src:
        return None
    if src.lstrip().lower().startswith(BLOCKED_SCHEMES):
        logger.warning("Blocked potentially unsafe image source: %s", src)
        return None
    return src


def render_element(element: DslElement) -> html.Div | html.P | dcc.Input | html.Button:
    """Render one element (recursively for stacks).

    Raises:
        TypeError: If *element* is not a known element type.
    """
    if isinstance(element, Container):
        return html.Div(
            [render_element(child) for child in element.children],
            className=f"wireframe-stack {element.kind.replace('_', '-')}",
        )
    if isinstance(element, LabelComponent):
        return html.P(element.text, className="wireframe-label")
    if isinstance(element, InputComponent):
        return dcc.Input(type="text", placeholder=element.placeholder, readOnly=True, className="wireframe-input")
    if isinstance(element, ButtonComponent):
        return html.Button(element.text, className="wireframe-button")
    if isinstance(element, ImageComponent):
        safe_src = sanitize_src(element.src)
        children = [html.Img(src=safe_src, alt=f"Wireframe: {element.src}")] if safe_src else []
        return html.Div(children, className="wireframe-image", **{"data-src": element.src or "not specified"})
    raise TypeError(f"Cannot render element of type {type(element).__name__}")


def render_screen(screen: Screen | None) -> html.Div:
    """Render a whole screen inside a device frame, or a placeholder for None."""
    if screen is None:
        return html.Div(
            "No screen selected or DSL is empty.",
            className="mobile-frame renderer-placeholder",
        )
    return html.Div(
        html.Div(
            html.Div([render_element(child) for child in screen.children], className="components-stack"),
            className="wireframe-screen",
            **{"data-screen-name": screen.name},
        ),
        className="mobile-frame",
    )
