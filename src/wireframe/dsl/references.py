# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cross-reference checks run after the block pass.

Links may name screens declared further down the document, so they can only
be resolved once every screen is known.
"""

from __future__ import annotations

from wireframe.model.document import Diagnostic, DiagnosticCategory, ScreenLink
from wireframe.model.elements import Screen

# ###############
# Public Interface
# ###############


def check_links(screens: list[Screen], links: list[ScreenLink]) -> list[Diagnostic]:
    """Report links whose source or destination is not a declared screen.

    Args:
        screens: All screens registered by the block pass, duplicates included.
        links: Links in declaration order.

    Returns:
        One diagnostic per dangling endpoint, at the line of the link. The
        source is reported before the destination for the same link.
    """
    declared = {screen.name for screen in screens}
    diagnostics: list[Diagnostic] = []
    for link in links:
        if link.source not in declared:
            diagnostics.append(_dangling(link, "Source", link.source))
        if link.destination not in declared:
            diagnostics.append(_dangling(link, "Destination", link.destination))
    return diagnostics


# ################
# Implementation
# ################


def _dangling(link: ScreenLink, role: str, name: str) -> Diagnostic:
    return Diagnostic(
        line_number=link.line_number,
        message=f'{role} screen "{name}" in link not defined.',
        category=DiagnosticCategory.SEMANTIC,
    )
