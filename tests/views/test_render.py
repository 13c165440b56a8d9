# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for rendering screens to Dash HTML components."""

import logging

import pytest
from dash import dcc, html

from wireframe.model.elements import (
    ButtonComponent,
    Container,
    ImageComponent,
    InputComponent,
    LabelComponent,
    Screen,
)
from wireframe.views.render import render_element, render_screen, sanitize_src

# ###############
# sanitize_src
# ###############


@pytest.mark.parametrize(
    "src",
    ["https://example.com/a.png", "/assets/logo.png", "photo.jpg", "images/relative.png"],
)
def test_sanitize_src_keeps_safe_sources(src: str) -> None:
    """Ordinary URLs and paths pass through unchanged."""
    assert sanitize_src(src) == src


@pytest.mark.parametrize(
    "src",
    ["javascript:alert(1)", "JavaScript:alert(1)", "  javascript:void(0)", "data:image/png;base64,AAAA"],
)
def test_sanitize_src_blocks_unsafe_schemes(src: str) -> None:
    """Script and data URIs are rejected regardless of case and leading space."""
    assert sanitize_src(src) is None


@pytest.mark.parametrize("src", ["", None])
def test_sanitize_src_rejects_empty(src: str | None) -> None:
    """Empty values cannot be loaded."""
    assert sanitize_src(src) is None


def test_sanitize_src_logs_blocked_source(caplog: pytest.LogCaptureFixture) -> None:
    """Blocking a source is logged as a warning."""
    with caplog.at_level(logging.WARNING, logger="wireframe.views.render"):
        sanitize_src("javascript:alert(1)")
    assert "javascript:alert(1)" in caplog.text


# ###############
# render_element
# ###############


def test_render_label() -> None:
    """Labels render as paragraphs."""
    node = render_element(LabelComponent(text="Hello", line_number=1))
    assert isinstance(node, html.P)
    assert node.children == "Hello"
    assert node.className == "wireframe-label"


def test_render_input_is_read_only() -> None:
    """Inputs show their placeholder and cannot be typed into."""
    node = render_element(InputComponent(placeholder="Name", line_number=1))
    assert isinstance(node, dcc.Input)
    assert node.placeholder == "Name"
    assert node.readOnly is True


def test_render_button() -> None:
    """Buttons render with their caption."""
    node = render_element(ButtonComponent(text="Go", line_number=1))
    assert isinstance(node, html.Button)
    assert node.children == "Go"


def test_render_safe_image() -> None:
    """A safe image source produces an img element."""
    node = render_element(ImageComponent(src="https://example.com/a.png", line_number=1))
    assert isinstance(node, html.Div)
    assert getattr(node, "data-src") == "https://example.com/a.png"
    assert len(node.children) == 1
    assert isinstance(node.children[0], html.Img)
    assert node.children[0].src == "https://example.com/a.png"


def test_render_unsafe_image_omits_img() -> None:
    """An unsafe image source renders only the placeholder box."""
    node = render_element(ImageComponent(src="javascript:alert(1)", line_number=1))
    assert isinstance(node, html.Div)
    assert node.children == []
    assert getattr(node, "data-src") == "javascript:alert(1)"


def test_render_nested_stacks() -> None:
    """Stacks render as divs named after their direction, preserving child order."""
    stack = Container(
        kind="vertical_stack",
        children=[
            LabelComponent(text="Top", line_number=2),
            Container(kind="horizontal_stack", children=[ButtonComponent(text="A", line_number=4)], line_number=3),
        ],
        line_number=1,
    )
    node = render_element(stack)
    assert isinstance(node, html.Div)
    assert node.className == "wireframe-stack vertical-stack"
    assert isinstance(node.children[0], html.P)
    inner = node.children[1]
    assert inner.className == "wireframe-stack horizontal-stack"
    assert isinstance(inner.children[0], html.Button)


def test_render_unknown_element_raises() -> None:
    """Anything that is not a screen element is rejected."""
    with pytest.raises(TypeError):
        render_element(Screen(name="S", line_number=1))  # type: ignore[arg-type]


# ###############
# render_screen
# ###############


def test_render_no_screen_shows_placeholder() -> None:
    """Without a screen a placeholder message is shown."""
    node = render_screen(None)
    assert node.children == "No screen selected or DSL is empty."
    assert "renderer-placeholder" in node.className


def test_render_screen_in_frame() -> None:
    """A screen renders inside a device frame with its components in order."""
    screen = Screen(
        name="Home",
        children=[LabelComponent(text="Hi", line_number=2), ButtonComponent(text="Go", line_number=3)],
        line_number=1,
    )
    frame = render_screen(screen)
    assert frame.className == "mobile-frame"
    body = frame.children
    assert body.className == "wireframe-screen"
    assert getattr(body, "data-screen-name") == "Home"
    items = body.children.children
    assert [type(item) for item in items] == [html.P, html.Button]
