# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Map diagnostics onto character ranges of the edited source."""

from __future__ import annotations

from dataclasses import dataclass

from wireframe.model.document import Diagnostic

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DiagnosticMarker:
    """A diagnostic anchored to a span of the editor text.

    Attributes:
        line_number: The diagnostic's 1-based line number.
        start: Offset of the first character of the line.
        end: Offset just past the last character of the line (newline excluded).
        message: Text shown to the user.
        in_range: False when the line does not exist in the source; the span
            is then the placeholder ``(0, 0)``.
    """

    line_number: int
    start: int
    end: int
    message: str
    in_range: bool = True


def build_markers(source: str, diagnostics: list[Diagnostic]) -> list[DiagnosticMarker]:
    """Build one editor marker per diagnostic, in the given order.

    Diagnostics may refer to a document that has since been edited, so a
    line number outside the current text is not an error: the marker falls
    back to the start of the document.
    """
    offsets = _line_offsets(source)
    markers: list[DiagnosticMarker] = []
    for diag in diagnostics:
        if 1 <= diag.line_number <= len(offsets):
            start, end = offsets[diag.line_number - 1]
            markers.append(DiagnosticMarker(line_number=diag.line_number, start=start, end=end, message=diag.message))
        else:
            markers.append(
                DiagnosticMarker(
                    line_number=diag.line_number,
                    start=0,
                    end=0,
                    message=f"L{diag.line_number}: {diag.message} (Error at invalid line)",
                    in_range=False,
                )
            )
    return markers


# ################
# Implementation
# ################


def _line_offsets(source: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` offsets for every line of *source*."""
    offsets: list[tuple[int, int]] = []
    pos = 0
    for line in source.split("\n"):
        offsets.append((pos, pos + len(line)))
        pos += len(line) + 1
    return offsets
