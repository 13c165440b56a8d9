# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Screen lookup for selection widgets."""

from __future__ import annotations

from wireframe.model.document import ParseResult
from wireframe.model.elements import Screen

# ###############
# Public Interface
# ###############


class ScreenNotFoundError(Exception):
    """Raised when no screen with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Screen '{name}' not found")
        self.name = name


def find_screen(result: ParseResult, name: str) -> Screen:
    """Return the first screen called *name*.

    Duplicate names are allowed in a document; the earliest declaration wins.

    Raises:
        ScreenNotFoundError: If no screen has that name.
    """
    for screen in result.screens:
        if screen.name == name:
            return screen
    raise ScreenNotFoundError(name)


def select_active_screen(result: ParseResult, previous: str | None) -> Screen | None:
    """Pick the screen to show after a re-parse.

    The previously active screen is kept while it still exists; otherwise the
    first screen is used, or None for a document without screens.
    """
    if previous is not None:
        try:
            return find_screen(result, previous)
        except ScreenNotFoundError:
            pass
    if result.screens:
        return result.screens[0]
    return None
