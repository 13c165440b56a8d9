# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Screen elements for the wireframe document model (components and stacks)."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class LabelComponent(BaseModel):
    """A static text label."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["label"] = "label"
    text: str
    line_number: int


class InputComponent(BaseModel):
    """A single-line text input with an optional placeholder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["input"] = "input"
    placeholder: str = ""
    line_number: int


class ButtonComponent(BaseModel):
    """A push button with a caption."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["button"] = "button"
    text: str
    line_number: int


class ImageComponent(BaseModel):
    """An image placeholder.

    ``src`` holds the literal value from the source text. It is not
    sanitized here; renderers must filter unsafe schemes themselves.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    src: str
    line_number: int


ContainerKind = Literal["vertical_stack", "horizontal_stack"]


class Container(BaseModel):
    """A layout stack that owns an ordered list of child elements."""

    kind: ContainerKind
    children: list[DslElement] = _Field(default_factory=list)
    line_number: int


# A leaf component (no children).
Component = LabelComponent | InputComponent | ButtonComponent | ImageComponent

# Anything that can appear inside a screen or a stack.
# The `kind` discriminator keeps (de)serialization unambiguous.
DslElement = Annotated[
    LabelComponent | InputComponent | ButtonComponent | ImageComponent | Container,
    _Field(discriminator="kind"),
]


class Screen(BaseModel):
    """A named top-level page holding an ordered list of elements."""

    name: str
    children: list[DslElement] = _Field(default_factory=list)
    line_number: int


# Resolve forward references in self-referential models.
Container.model_rebuild()
Screen.model_rebuild()
