# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document model for wireframe sources (screens, stacks, navigation, links)."""

from wireframe.model.document import (
    Diagnostic,
    DiagnosticCategory,
    DrawerStack,
    NavigationConfig,
    NavigationStack,
    ParseResult,
    ScreenLink,
    TabStack,
)
from wireframe.model.elements import (
    ButtonComponent,
    Component,
    Container,
    ContainerKind,
    DslElement,
    ImageComponent,
    InputComponent,
    LabelComponent,
    Screen,
)

__all__ = [
    # Elements
    "LabelComponent",
    "InputComponent",
    "ButtonComponent",
    "ImageComponent",
    "Component",
    "ContainerKind",
    "Container",
    "DslElement",
    "Screen",
    # Document
    "NavigationStack",
    "TabStack",
    "DrawerStack",
    "NavigationConfig",
    "ScreenLink",
    "DiagnosticCategory",
    "Diagnostic",
    "ParseResult",
]
