# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document-level model: navigation, links, diagnostics and the parse result."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from wireframe.model.elements import Screen

# ###############
# Public Interface
# ###############


class NavigationStack(BaseModel):
    """Push/pop navigation starting at a root screen."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["navigation_stack"] = "navigation_stack"
    root: str
    line_number: int


class TabStack(BaseModel):
    """Tab bar navigation; ``tabs`` is never empty."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tab_stack"] = "tab_stack"
    tabs: list[str]
    line_number: int


class DrawerStack(BaseModel):
    """Side drawer navigation with a main root screen."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["drawer_stack"] = "drawer_stack"
    root: str
    drawer: str
    line_number: int


NavigationConfig = Annotated[
    NavigationStack | TabStack | DrawerStack,
    _Field(discriminator="kind"),
]


class ScreenLink(BaseModel):
    """A directed link from one screen to another, as declared by ``A -> B``."""

    model_config = ConfigDict(frozen=True)

    source: str
    destination: str
    line_number: int


class DiagnosticCategory(Enum):
    """Broad class of a diagnostic. All categories share the same severity."""

    STRUCTURAL = "structural"
    INDENTATION = "indentation"
    TOP_LEVEL_GRAMMAR = "top_level_grammar"
    NESTED_GRAMMAR = "nested_grammar"
    SEMANTIC = "semantic"
    CONTENT = "content"


class Diagnostic(BaseModel):
    """A non-fatal problem tied to a single 1-based source line."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    message: str
    category: DiagnosticCategory


class ParseResult(BaseModel):
    """Everything produced by one parse of a wireframe document."""

    screens: list[Screen] = _Field(default_factory=list)
    navigation: list[NavigationConfig] = _Field(default_factory=list)
    links: list[ScreenLink] = _Field(default_factory=list)
    diagnostics: list[Diagnostic] = _Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any diagnostics were reported."""
        return len(self.diagnostics) > 0

    def screen_names(self) -> list[str]:
        """Return screen names in declaration order (duplicates included)."""
        return [screen.name for screen in self.screens]
