# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for mapping diagnostics onto editor spans."""

from wireframe.dsl.parser import parse
from wireframe.model.document import Diagnostic, DiagnosticCategory
from wireframe.views.markers import DiagnosticMarker, build_markers

# ###############
# Helpers
# ###############


def _diag(line_number: int, message: str = "problem") -> Diagnostic:
    return Diagnostic(line_number=line_number, message=message, category=DiagnosticCategory.STRUCTURAL)


# ###############
# Public Interface
# ###############


def test_no_diagnostics_no_markers() -> None:
    """A clean document has no markers."""
    assert build_markers("screen A", []) == []


def test_marker_spans_whole_line() -> None:
    """A marker covers its line from first character to end, newline excluded."""
    markers = build_markers("a\nbb\nccc", [_diag(2)])
    assert markers == [DiagnosticMarker(line_number=2, start=2, end=4, message="problem")]


def test_marker_on_first_and_last_line() -> None:
    """Offsets are correct at both ends of the document."""
    markers = build_markers("a\nbb\nccc", [_diag(1), _diag(3)])
    assert [(m.start, m.end) for m in markers] == [(0, 1), (5, 8)]
    assert all(m.in_range for m in markers)


def test_marker_on_empty_line() -> None:
    """An empty line produces an empty span at its position."""
    markers = build_markers("a\n\nb", [_diag(2)])
    assert (markers[0].start, markers[0].end) == (2, 2)


def test_out_of_range_line_falls_back_to_document_start() -> None:
    """A line past the end of the text maps to (0, 0) with an annotated message."""
    markers = build_markers("a\nbb", [_diag(10, "Unclosed thing")])
    assert markers == [
        DiagnosticMarker(
            line_number=10,
            start=0,
            end=0,
            message="L10: Unclosed thing (Error at invalid line)",
            in_range=False,
        )
    ]


def test_line_zero_is_out_of_range() -> None:
    """Line numbers are 1-based; zero is never a valid line."""
    markers = build_markers("a", [_diag(0)])
    assert not markers[0].in_range


def test_markers_keep_diagnostic_order() -> None:
    """Markers are produced in the order of the diagnostics."""
    markers = build_markers("a\nb\nc", [_diag(3, "x"), _diag(1, "y")])
    assert [m.message for m in markers] == ["x", "y"]


def test_markers_for_parsed_document() -> None:
    """Every diagnostic of a parse points into the parsed text."""
    source = 'screen S\n  vertical_stack {\n    label "a"\n'
    result = parse(source)
    markers = build_markers(source, result.diagnostics)
    assert len(markers) == 1
    assert source[markers[0].start : markers[0].end] == "  vertical_stack {"
