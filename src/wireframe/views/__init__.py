# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consumers of parse results: screen selection, markers, rendering, storyboard."""

from wireframe.views.markers import DiagnosticMarker, build_markers
from wireframe.views.render import render_element, render_screen, sanitize_src
from wireframe.views.screens import ScreenNotFoundError, find_screen, select_active_screen
from wireframe.views.storyboard import LinkEdge, ScreenNode, StoryboardData, build_storyboard

__all__ = [
    "DiagnosticMarker",
    "build_markers",
    "render_element",
    "render_screen",
    "sanitize_src",
    "ScreenNotFoundError",
    "find_screen",
    "select_active_screen",
    "LinkEdge",
    "ScreenNode",
    "StoryboardData",
    "build_storyboard",
]
